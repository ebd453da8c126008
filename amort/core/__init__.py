# amort/core/__init__.py
