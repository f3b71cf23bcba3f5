from setuptools import setup, find_packages

setup(
    name="unipkg",
    version="1.0.0",
    description="unipkg: one install/uninstall interface over the host's native package manager",
    author="Alkama Sudad",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["rich", "psutil"],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "unipkg=unipkg.cli:main",
            "install-pkg=unipkg.cli:install_main",
            "uninstall-pkg=unipkg.cli:uninstall_main",
            "get-package-manager=unipkg.cli:detect_main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
