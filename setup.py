from setuptools import setup, find_namespace_packages

setup(
    name="movie_search_reviews",
    version="0.1",
    packages=find_namespace_packages(include=["app", "app.*"]),
    package_data={"app": ["data/*.json"]},
    install_requires=[
        "fastapi",
        "uvicorn",
        "pydantic>=2",
        "httpx>=0.27.0",
    ],
    extras_require={
        "test": [
            "pytest",
            "anyio",
        ],
    },
    entry_points={
        "console_scripts": [
            "movie-reviews=app.main:main",
        ],
    },
    python_requires='>=3.11',
)
