"""Setup for PomoClock.

Install for development:
    pip install -e ".[test]"

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

from setuptools import setup

APP = ["main.py"]
DATA_FILES = []
OPTIONS = {
    "argv_emulation": False,
    "iconfile": None,
    "plist": {
        "CFBundleName": "PomoClock",
        "CFBundleDisplayName": "PomoClock",
        "CFBundleIdentifier": "com.pomoclock.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
        "LSMinimumSystemVersion": "13.0",
    },
}

setup(
    app=APP,
    data_files=DATA_FILES,
    options={"py2app": OPTIONS},
    name="PomoClock",
    version="0.1.0",
    python_requires=">=3.10",
    packages=["pomoclock", "pomoclock.timer", "pomoclock.ui"],
    install_requires=["PyQt6"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["pomoclock = pomoclock.__main__:main"]},
)
