from setuptools import find_packages, setup

NAME = "faturas"

setup(
    name=NAME,
    version="0.1.0",
    description="Armazém de faturas em memória ordenado pelo número da fatura.",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=["openpyxl"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["faturas = faturas.cli:main"]},
)
