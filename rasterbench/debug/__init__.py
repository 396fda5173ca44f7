# rasterbench/debug/__init__.py
