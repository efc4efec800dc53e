from setuptools import setup


if __name__ == "__main__":

    with open("README.rst") as f:
        long_description = f.read()

    setup(
        classifiers=[
            "Environment :: Web Environment",
            "Framework :: Twisted",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: MIT License",
            "Operating System :: OS Independent",
            "Programming Language :: Python",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Programming Language :: Python :: Implementation :: CPython",
            "Programming Language :: Python :: Implementation :: PyPy",
            "Topic :: Internet :: WWW/HTTP",
            "Topic :: Software Development :: Libraries :: Python Modules",
        ],
        description="HTTP responses streamed from files, pipes and sockets",
        long_description=long_description,
        long_description_content_type="text/x-rst",
        python_requires=">=3.8",
        version="21.1.0",
        install_requires=[
            "attrs>=21.3.0",
            "incremental",
            "Tubes",
            "Twisted>=21.2.0",
            "zope.interface",
        ],
        extras_require={
            "test": [
                "hypothesis>=6.80",
            ],
        },
        keywords="twisted http response stream file socket",
        license="MIT",
        name="passthru",
        packages=["passthru", "passthru.test"],
        package_dir={"": "src"},
        package_data=dict(
            passthru=[],
        ),
        zip_safe=False,
    )
