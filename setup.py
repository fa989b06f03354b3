from setuptools import find_packages, setup

setup(
    name="character-api",
    version="0.1.0",
    packages=find_packages("src"),
    package_dir={"": "src"},
    package_data={"character_api": ["data/*.json"]},
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "python-dotenv",
        "fastapi",
        "pydantic>=2",
        "uvicorn",
    ],
    extras_require={
        "test": ["pytest", "httpx"],
    },
    entry_points={
        "console_scripts": ["character-api=character_api.main:main"],
    },
)
