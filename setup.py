from re import search
from setuptools import setup, find_packages

with open("src/graphql_loader/version.py") as version_file:
    version = search('version = "(.*)"', version_file.read()).group(1)

with open("README.md") as readme_file:
    readme = readme_file.read()

setup(
    name="graphql-loader",
    version=version,
    description="Load GraphQL schema definitions from multiple files"
    " and merge them into one executable schema.",
    long_description=readme,
    long_description_content_type="text/markdown",
    keywords="graphql schema loader merge",
    license="MIT license",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    install_requires=["graphql-core>=3.2,<3.3"],
    extras_require={
        "test": [
            "pytest>=7",
            "pytest-asyncio>=0.21",
            "pytest-describe>=2",
        ],
    },
    python_requires=">=3.10,<4",
    packages=find_packages("src"),
    package_dir={"": "src"},
    # PEP-561: https://www.python.org/dev/peps/pep-0561/
    package_data={"graphql_loader": ["py.typed"]},
    include_package_data=True,
    zip_safe=False,
)
