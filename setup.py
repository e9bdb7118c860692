from pathlib import Path

from setuptools import find_packages, setup

setup(
    name="konanrun",
    version="0.1.0",
    description="Compile Kotlin/Native sources from structured options.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    python_requires=">=3.12",
    package_dir={"": "src"},
    packages=find_packages(where="src", exclude=["tests"]),
    entry_points={"console_scripts": ["konanrun=konanrun.cli:main"]},
    install_requires=["appdirs", "cyclopts>=4", "pydantic>=2", "PyYAML", "rich"],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.12",
    ],
)
