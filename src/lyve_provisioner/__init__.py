"""Terraform-style provisioning for Lyve Cloud permissions and service accounts."""

__version__ = "0.1.0"
