from setuptools import setup, find_packages
from pathlib import Path

# Read the requirements from requirements.txt
reqs_path = Path(__file__).parent / "requirements.txt"
requirements = [
    line.strip()
    for line in reqs_path.read_text().splitlines()
    if line.strip() and not line.startswith("#")
]

setup(
    name="portreview",
    version="0.1.0",
    description="Template compliance review for theme port repositories",
    packages=find_packages(),
    package_data={"portreview": ["ports.yml"]},
    python_requires=">=3.11",
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["portreview = portreview.cli:run"]},
)
