"""Portfolio site backend: security tools catalog and execution engine."""
