"""Command-line tools for awskit.

- ``python -m awskit.cli`` (or the ``awskit`` console script): run single
  S3, Lambda, or Cognito operations from a shell.

argparse only; the providers are imported through ``awskit.main`` so the CLI
builds exactly the same clients a library caller would.
"""
