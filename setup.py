from setuptools import setup, find_packages

setup(
    name="stylelog",
    version="0.1.0a0",  # PEP 440 form of src/stylelog/_version.py
    description="Styled console logging with level filtering, collapsible groups and log hooks",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "rich>=13.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Logging",
    ],
    python_requires=">=3.10",
)
