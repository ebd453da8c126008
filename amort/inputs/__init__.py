# amort/inputs/__init__.py
