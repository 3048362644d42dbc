"""
Customizer definitions sub-package for kbd-fixtures.

Contains one YAML file per locale, mapping a layout's placeholder slots to
concrete keys. The loader (customizer.py in the parent package) reads these
files at runtime.
"""
