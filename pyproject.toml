[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contextescape"
version = "0.1.0"
description = "Context-aware escapers and filters for HTML, CSS, JavaScript and URL output"
requires-python = ">=3.10"
dependencies = []
keywords = ["html", "escaping", "xss", "css", "javascript", "url", "sanitizer"]
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
    "Topic :: Security",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["contextescape"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
