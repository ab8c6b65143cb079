"""leakguard: verbose error leakage and its remediation."""
