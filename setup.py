from setuptools import find_packages, setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
	name='pyfutures',
	packages=find_packages(include=['pyfutures', 'pyfutures.*']),
	version='0.1.0',
	description="Binance USDⓈ-M Futures REST client for Python",
	long_description=long_description,
	long_description_content_type="text/markdown",
	license='MIT',
	python_requires='>=3.7',
	install_requires=['pandas>=1.1.4', 'python-dotenv>=0.15.0', 'requests>=2.23.0'],
	extras_require={
		'test': ['freezegun>=0.3.15', 'pytest', 'coverage>=5.1', 'urllib3'],
	},
)
