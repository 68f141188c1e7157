from setuptools import setup

setup(
    name='netplan-serializer',
    version='1.0.0',
    description='Netplan YAML serializer',
    long_description='Writes a single netplan network definition into a prioritized YAML file under etc/netplan',
    author='Ferenc Nandor Janky & Attila Gombos',
    author_email='info@effective-range.com',
    maintainer='Ferenc Nandor Janky & Attila Gombos',
    maintainer_email='info@effective-range.com',
    packages=['netplan_model', 'netplan_utility', 'netplan_yaml', 'netplan_writer'],
    install_requires=[
        'PyYAML',
        'python-context-logger@git+https://github.com/EffectiveRange/python-context-logger.git@latest',
    ],
    extras_require={
        'test': [
            'parameterized',
            'python-common-utility@git+https://github.com/EffectiveRange/python-common-utility.git@latest',
            'python-test-utility@git+https://github.com/EffectiveRange/python-test-utility.git@latest',
        ],
    },
)
