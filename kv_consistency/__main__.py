from kv_consistency.driver import cli

cli()
