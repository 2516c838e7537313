import os
import sys

from setuptools import setup, find_packages

if sys.version_info < (3, 9, 0):
    sys.exit('Python 3.9.0 is the minimum required version')

PROJECT_ROOT = os.path.dirname(__file__)

about = {}
with open(os.path.join(PROJECT_ROOT, 'src', 'calcdemo', '__about__.py')) as file_:
    exec(file_.read(), about)

with open(os.path.join(PROJECT_ROOT, 'README.rst')) as file_:
    long_description = file_.read()

INSTALL_REQUIRES = [
    'click >= 8.0',
    'hypercorn >= 0.14',
    'jinja2 >= 3.0',
    'quart >= 0.19',
]

TESTS_REQUIRE = [
    'hypothesis',
    'pytest',
    'pytest-asyncio',
]

setup(
    name='calcdemo',
    version=about['__version__'],
    python_requires='>=3.9.0',
    description="A single page calculator served with Quart",
    long_description=long_description,
    long_description_content_type='text/x-rst',
    license='MIT',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Web Environment',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP :: Dynamic Content',
    ],
    package_dir={'': 'src'},
    packages=find_packages('src'),
    package_data={'calcdemo': ['templates/*.html']},
    install_requires=INSTALL_REQUIRES,
    extras_require={
        'tests': TESTS_REQUIRE,
    },
    entry_points={
        'console_scripts': ['calcdemo=calcdemo:run'],
    },
    include_package_data=True,
)
