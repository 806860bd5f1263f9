"""
Preprocessor contract, factory and configuration loading.
"""
