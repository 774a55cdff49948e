[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "digsigctl"
version = "0.1.20"
description = "Controller and RPC server for digital signage systems."
requires-python = ">=3.10"
keywords = ["digital signage", "kiosk", "chromium", "systemd", "rpc", "sysinfo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "flask",
    "requests",
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
digsigctl = "digsigctl.server:main"
fix-chromium-preferences = "digsigctl.fix_preferences:main"

[tool.hatch.build.targets.wheel]
packages = ["digsigctl"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
