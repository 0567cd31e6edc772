from setuptools import find_packages, setup

package_name = "rot3_manifold"

setup(
    name=package_name,
    version="0.0.1",
    packages=find_packages(exclude=["test", "test.*"]),
    data_files=[
        (
            "share/" + package_name + "/config",
            [
                "config/rot3_manifold_base.yaml",
            ],
        ),
    ],
    python_requires=">=3.8",
    install_requires=["numpy", "PyYAML"],
    extras_require={
        "test": ["pytest", "scipy"],
    },
    zip_safe=True,
    maintainer="you",
    maintainer_email="you@example.com",
    description="SO(3) rotation type with exponential/Cayley charts and analytic Jacobians",
    license="Apache-2.0",
)
