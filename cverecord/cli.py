import typer

from cverecord.commands import check, roundtrip, walk

# Create Typer app
app = typer.Typer(
    help="Command-line interface for the CVE Record codec.",
    no_args_is_help=True,
    add_completion=False,
)

app.command()(walk)
app.command()(check)
app.command()(roundtrip)


def main():
    app()


if __name__ == "__main__":
    main()
