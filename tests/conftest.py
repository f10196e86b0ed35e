"""Test configuration and fixtures."""

import logfire

# Console off, nothing sent; spans still run so instrumented code paths execute
logfire.configure(send_to_logfire=False, console=False)
