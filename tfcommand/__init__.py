"""Build Terraform CLI commands, check version compatibility and parse Terraform output."""

__version__ = "0.1.0"