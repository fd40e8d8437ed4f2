"""SOLID principles, each shown as a violating and a compliant design."""
