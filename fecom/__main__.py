from fecom.pipeline.comments.fetch import cli

if __name__ == "__main__":
    cli()
