[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "juez"
version = "0.1.0"
description = "Classic data structures and judge-style exercise solvers: lists, deques, trees, hash maps and table-driven problems."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "linked list",
    "binary tree",
    "hash map",
    "online judge",
    "exercises",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
juez-referencias = "juez.referencias:main"
juez-pillo-toro = "juez.pillo_toro:main"
juez-ocurrencias = "juez.ocurrencias:main"
juez-diccionario = "juez.diccionario:main"
juez-deportes = "juez.deportes:main"
juez-capitulos = "juez.capitulos:main"
juez-ranking = "juez.ranking:main"
juez-bingo = "juez.bingo:main"
juez-autoescuela = "juez.autoescuela:main"
juez-torres = "juez.torres:main"
juez-elecciones = "juez.elecciones:main"
juez-oficina = "juez.oficina:main"
juez-restaurante = "juez.restaurante:main"

[tool.hatch.build.targets.wheel]
packages = ["juez"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
