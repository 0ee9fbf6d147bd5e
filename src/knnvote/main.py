import click

from .config import LOG_LEVELS, Settings, setup_logging
from .errors import InvalidArgument
from .formatting import export_csv, render_results
from .generator import generate_test_set, generate_training_set, make_rng
from .predictor import classify_all


class PositionalCommand(click.Command):
    """Command whose usage errors (missing or malformed arguments) exit with status 1."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def run(n_train, d, n_test, k, seed=None):
    """
    Generate a training and a test set and classify the test set.

    Returns:
    - (train, predictions): list of LabeledPoint, list of PredictedPoint
    """
    rng = make_rng(seed)
    train = generate_training_set(n_train, d, rng)
    test = generate_test_set(n_test, d, rng)
    predictions = classify_all(train, test, k, d)
    return train, predictions


@click.command(cls=PositionalCommand)
@click.argument("n_train", type=click.IntRange(min=1))
@click.argument("d", type=click.IntRange(min=1))
@click.argument("n_test", type=click.IntRange(min=1))
@click.argument("k", type=click.IntRange(min=1))
@click.option(
    "--seed",
    type=click.IntRange(min=0),
    default=None,
    help="Seed for data generation (default: KNNVOTE_SEED or random)",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Also write both datasets to this CSV file (default: KNNVOTE_OUTPUT)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: KNNVOTE_LOG_LEVEL or WARNING)",
)
def cli(n_train, d, n_test, k, seed, output, log_level):
    """
    Classify N_TEST random points by majority vote of their K nearest
    neighbors among N_TRAIN random labeled points of dimensionality D.
    """
    try:
        settings = Settings.from_env(seed=seed, log_level=log_level, output=output)
    except InvalidArgument as e:
        raise click.ClickException(str(e))

    logger = setup_logging(settings.log_level)

    try:
        train, predictions = run(n_train, d, n_test, k, seed=settings.seed)
    except InvalidArgument as e:
        raise click.ClickException(str(e))

    # export first so a bad path fails before anything is printed
    if settings.output:
        try:
            export_csv(train, predictions, settings.output)
        except OSError as e:
            raise click.ClickException(f"Could not write {settings.output}: {e}")
        logger.info(f"Wrote {len(train) + len(predictions)} rows to {settings.output}")

    click.echo(render_results(train, predictions))


def main():
    cli()


if __name__ == "__main__":
    main()
