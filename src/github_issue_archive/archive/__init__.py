"""Issue-to-document archive components.

- Settings loaded from the environment (and `.env`)
- Fail-open TOML configuration
- Structured logging
- Label routing, document assembly and filesystem output
- The sequential archive pipeline and its CLI
"""
