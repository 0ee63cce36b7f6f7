"""
This package contains everything needed to read a Thai QR payload.

Sub-packages:

- ``tlv``: Tag-Length-Value scanning and field framing.
- ``tags``: Descriptions for top-level tags and nested sub-tags.
- ``payload``: Full payload decoding into ``ThaiQRData``.
"""
