from setuptools import setup, find_namespace_packages

with open("README.md", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="okdata-keycloak-setup",
    version="0.1.0",
    author="Origo Dataplattform",
    author_email="dataplattform@oslo.kommune.no",
    description="Setup of identity providers brokered through Keycloak",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/oslokommune/okdata-keycloak-setup",
    packages=find_namespace_packages(
        include=["clients", "jobs", "keycloak_setup", "models"]
    ),
    install_requires=[
        "aws-xray-sdk>=2.12,<3",
        "boto3>=1.28.11,<2",
        "okdata-aws>=5",
        "pydantic>2,<3",
        "python-keycloak>=3",
    ],
    extras_require={
        "test": [
            "moto[ssm]>=5",
            "pytest",
            "requests>=2.28.0,<3",
        ],
    },
    python_requires=">=3.10",
)
