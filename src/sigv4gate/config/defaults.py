"""Starter .sigv4gate.toml and policy.yaml templates."""

DEFAULT_TOML = """\
# sigv4gate configuration

[policy]
path = "policy.yaml"      # relative to this file
reload = "always"         # always | mtime (reuse the parsed policy until the file changes)

[logging]
level = "WARNING"         # DEBUG | INFO | WARNING | ERROR

[output]
format = "terminal"       # terminal | json
"""

DEFAULT_POLICY = """\
# sigv4gate allow-list
# Account ids must be quoted: YAML reads unquoted leading-zero numbers as octal.
# "*" matches any account, region, or service at its level.
accounts:
  "581039954779":
    regions:
      "us-east-1":
        services: ["s3", "sts"]
      "*":
        services: ["sts"]
  # "*":
  #   regions:
  #     "*":
  #       services: ["*"]
"""
