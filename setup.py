
from setuptools import setup

VERSION = "0.0.0a0"
DESCRIPTION = ("Area under the ROC curve of binary "
                "classifier scores by the Mann-Whitney "
                "rank-sum identity.")


setup(
    name="rsauc",
    author="Robert Vogel",
    description=DESCRIPTION,
    version=VERSION,
    packages=["rsauc"],
    install_requires=["numpy", "scipy"]
    )
