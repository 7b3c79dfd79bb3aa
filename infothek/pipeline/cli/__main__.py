from infothek.pipeline.cli import cli

cli(obj={})
