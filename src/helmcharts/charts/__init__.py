"""Helm chart values schemas."""
