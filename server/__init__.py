"""HTTP service exposing the Scoundrel engine."""
