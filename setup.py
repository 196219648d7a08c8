from setuptools import setup, find_packages

setup(
    name="sudoku-game",
    version="1.0.0",
    description="Sudoku Puzzle Generator & Game Session Engine",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "matplotlib>=3.6.0",
        "seaborn>=0.11.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "sudoku-game=sudoku_game.cli:main",
        ],
    },
)
