from setuptools import setup, find_packages

setup(
    name="notion_blocks",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.5.2",
    ],
    extras_require={
        "test": ["pytest>=7.4.0"],
    },
    python_requires=">=3.9",
)
