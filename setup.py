import setuptools

setuptools.setup(
	name='brute-tools',
	version='0.1.0',
	packages=[
		'brutetools',
		'brutetools.grammar',
		'brutetools.matching',
		'brutetools.support',
	],
	description='Match and tokenize text against small grammars by brute-force backtracking',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
    ],
)
