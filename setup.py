from setuptools import setup, find_packages

setup(
    name="randfile",
    version="0.0.2",
    packages=find_packages(exclude=["tests"]),
    python_requires=">=3.9",
    install_requires=["cryptography"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "create-random-file = randfile.cli:main",
        ]
    },
)
