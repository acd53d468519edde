from setuptools import find_packages, setup

setup(
    name="jenkins-jobs-snapshot",
    version="0.1.0",
    packages=find_packages(
        include=[
            "jenkins_common",
            "jenkins_common.*",
            "jenkins_persistence",
            "jenkins_persistence.*",
            "jenkins_client",
            "jenkins_client.*",
            "jenkins_cli",
            "jenkins_cli.*",
        ]
    ),
    install_requires=[
        "requests>=2.31.0",
        "aiosqlite>=0.19.0",
        "click>=8.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "jenkins-jobs=jenkins_cli.cli:main",
        ],
    },
    python_requires=">=3.10",
)
