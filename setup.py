from setuptools import find_packages, setup

if __name__ == "__main__":
    setup(
        name="picocurves",
        version="0.2.4",
        description="Picocurves unified elliptic-curve key management",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        install_requires=["cryptography>=41"],
        extras_require={"test": ["pytest"]},
    )
