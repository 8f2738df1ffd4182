[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nativedialog"
version = "0.1.0"
description = "Show file and message dialogs on Unix desktops through kdialog or zenity"
requires-python = ">=3.10"
dependencies = []
keywords = ["dialog", "file dialog", "message box", "zenity", "kdialog", "gui"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nativedialog-tour = "nativedialog.tour:main"

[tool.hatch.build.targets.wheel]
packages = ["nativedialog"]

[tool.pytest.ini_options]
addopts = "-ra"
