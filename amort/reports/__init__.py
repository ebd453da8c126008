# amort/reports/__init__.py
