from setuptools import setup, find_packages

setup(
    name="sudokusolve",
    version="1.0.0",
    description="Sudoku solver using backtracking search with constraint propagation",
    author="robomotic",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "tqdm>=4.62.0",
        "rich>=12.0.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "sudokusolve=sudokusolve.cli:main",
        ],
    },
)
