from setuptools import find_packages, setup

setup(
    name='network-janitor',
    version='1.0.0',
    description='Removes container networks left behind by finished jobs',
    packages=find_packages(exclude=[
        'netjanitor.test',
        'netjanitor.test.*',
    ]),
    python_requires='>=3.8',
    install_requires=[
        'chardet',
        'python-dateutil',
        'simplejson',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        "console_scripts": [
            "network-janitor = netjanitor.main:main",
        ],
    }
)
