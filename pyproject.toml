[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bannerart"
version = "0.1.0"
description = "Render text as large ASCII-art banners with colours, alignment and file output"
requires-python = ">=3.10"
dependencies = []
keywords = ["ascii-art", "banner", "terminal", "text", "font"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Fonts",
    "Topic :: Artistic Software",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bannerart = "bannerart.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bannerart"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
