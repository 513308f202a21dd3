from setuptools import setup, find_packages

install_requires = [
    'Django',
    'dnspython',
    'hashids',
]
tests_require = ['pytest', 'pytest-django', 'flake8']

setup(
    name='dnsync',
    version='1.0.0',
    description="Canonical DNS record model for zone reconciliation",
    author="Presslabs",
    author_email="ping@presslabs.com",
    install_requires=install_requires,
    tests_require=tests_require,
    packages=find_packages(include=['dnsync', 'dnsync.*']),
    extras_require={
        'test': tests_require
    },
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',  # example license
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ]
)
