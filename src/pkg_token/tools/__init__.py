"""
pkg_token.tools

Operator-side helpers:

- TokenSettings: configuration for issuing tokens.
- settings_from_env / maker_from_env (pkg_token.tools.env):
    env-driven wiring for CLIs and services.
- main (pkg_token.tools.cli): the `pkg-token` command.
"""
