[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rabbitui"
version = "0.1.0"
description = "A terminal client for the RabbitMQ Management API"
requires-python = ">=3.10"
keywords = ["tui", "rabbitmq", "terminal", "monitoring", "amqp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "requests>=2.28",
    "blessed>=1.20",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
rabbitui = "rabbitui.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rabbitui"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
