from setuptools import find_packages, setup

with open("ianazone/version.py") as f:
    exec(f.read())

setup(
    name="python-ianazone",
    version=__version__,  # type: ignore # noqa: F821
    description="UTC offsets of IANA time zones, resolved through Babel",
    author="",
    author_email="",
    license="GPLv3",
    packages=find_packages(include=["ianazone", "ianazone.*"]),
    install_requires=["babel>=2.12", "tzdata", "pydantic>=2", "click>=8"],
    extras_require={
        "cli": ["rich", "orjson"],
        "test": ["pytest", "pytest-mock", "freezegun"],
    },
    python_requires=">=3.11",
    entry_points={"console_scripts": ["ianazone=ianazone.cli.main:cli"]},
    zip_safe=False,
)
