from setuptools import find_packages, setup

with open("requirements.txt", "r") as f:
    requirements = list(filter(None, map(str.strip, f.read().split("\n"))))

setup(
    name="logging-delegate",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*", "docs", "docs.*"]),
    description="A library that makes it easy to bundle all of an object's log statements into a logging delegate.",
    license="MIT",
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "sphinx_rtd_theme"],
    },
    python_requires=">=3.11",
    package_data={
        "logging_delegate": ["py.typed"],
    },
    include_package_data=True,
    zip_safe=False,
)
