from setuptools import setup, find_packages

setup(
    name="grid_array",
    version="0.1.0",
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    package_data={"grid_array": ["configs/*.yaml"]},
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "grid_tool=grid_array.scripts.grid_tool:main",
        ]
    },
)
