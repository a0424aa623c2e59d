"""HTTP API for the bureau payroll service."""
