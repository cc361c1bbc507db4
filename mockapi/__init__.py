"""
mockapi: DTO code generation for mocked API collections.

Reads endpoint collections (native or Postman), infers object schemas from
their example bodies and generates typed models in eight languages.
"""

__version__ = "0.1.0"
