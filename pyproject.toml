[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "groupfun"
version = "0.1.0"
description = "Pastime logic for group chat bots: sign-in levels, sleep tracking, tarot, fortune slips, reincarnation draws, picture verdicts and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "bot", "group", "tarot", "sign-in", "sleep", "games"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["groupfun"]

[tool.pytest.ini_options]
addopts = "-ra"
