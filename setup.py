from setuptools import setup, find_packages

setup(
    name="decision_playground",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy",
        "matplotlib",
        "pytest",
    ],
    extras_require={
        'test': ['pytest', 'scipy'],
        'dev': ['pylint']
    }
)
