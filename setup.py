from setuptools import find_packages, setup

package_name = "mazesolver"


def read_requirements():
    with open("requirements.txt", "r") as file:
        return [
            line.strip() for line in file if line.strip() and not line.startswith("#")
        ]


setup(
    name=package_name,
    version="0.1.0",
    packages=find_packages(
        exclude=["tests", "tests.*", "examples", "examples.*"]
    ),  # Exclude tests and subpackages
    install_requires=read_requirements(),
    zip_safe=True,
    description="Solves text mazes with recursive backtracking over a wrap-around grid",
    license="MIT",
    python_requires=">=3.10",
    extras_require={"test": ["pytest"]},
    tests_require=["pytest"],
    entry_points={
        "console_scripts": ["mazesolver=mazesolver.main:app"],
    },
)
