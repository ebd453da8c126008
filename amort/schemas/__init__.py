# amort/schemas/__init__.py
