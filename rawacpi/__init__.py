"""ACPI system description tables read from and written to bytes."""

__version__ = "0.0.2"