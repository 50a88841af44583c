from setuptools import setup, find_packages

setup(
    name="xdgmeta",
    version="1.0.0",
    description="freedesktop.org application metadata: desktop entries, icon themes and XDG dirs",
    author="Ty",
    license="GPLv3",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "xdgmeta=xdgmeta.main:main",
        ],
    },
)
