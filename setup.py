from glob import glob
from setuptools import setup


setup(
    name='nerpn',
    use_scm_version={
        # Building from a tarball, no VCS metadata to go by.
        'fallback_version': '1.0.0',
    },
    description='Minimalistic RPN calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['nerpn'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.11',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
            'bandit',
            'mypy',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
