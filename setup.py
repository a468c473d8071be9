from setuptools import setup, find_packages


setup(
    name = "ordtree",
    version = "0.1.0",
    description = "Ordered key-value container backed by a binary search tree",
    packages = find_packages(exclude=["tests"]),
    python_requires = ">=3.6",
    extras_require = {
        "test": ["pytest", "hypothesis"],
        },
)
