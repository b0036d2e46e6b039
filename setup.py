from setuptools import setup

# Metadata goes in setup.cfg. These are here for GitHub's dependency graph.
setup(
    name="Flask-GQL",
    install_requires=[
        "Flask>=2.3",
        "graphql-core>=3.2",
    ],
)
