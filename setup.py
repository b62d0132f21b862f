from setuptools import setup, find_packages

setup(
    name="dom-assertions",
    version="0.1",
    python_requires=">=3.8",
    packages=find_packages(include=["dom_assertions", "dom_assertions.*"]),
    install_requires=[
        "playwright",
        "pydantic>=2",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
        ],
    },
    entry_points={
        "pytest11": [
            "dom_assertions = dom_assertions.pytest_plugin",
        ],
    },
)
