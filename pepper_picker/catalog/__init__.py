"""
Pepper catalog package.

Responsibilities:
- Define the canonical Item and Preferences schema.
- Load and validate the bundled variety catalog.
- Provide preset search profiles and vendor link lookup.
"""
