"""Text helpers documented in several docstring styles."""

import re
import statistics


def slugify(text: str, separator: str = "-") -> str:
    """
    .SYNOPSIS
        Turn a title into a URL slug.

    .DESCRIPTION
        Lower-cases the text and joins its words with the separator.

    .PARAMETER text
        Title to convert.

    .PARAMETER separator
        String placed between words.

    .EXAMPLE
        slugify("Hello World")

        Returns 'hello-world'.

    .NOTES
        Non-ASCII letters are kept.
    """
    return separator.join(re.findall(r"\w+", text.lower()))


def summarize(values, ddof=0):
    """Summarize a column of numbers.

    Computes the mean and the standard deviation.

    Parameters
    ----------
    values : list of float
        The numbers to summarize.
    ddof : int, optional
        Delta degrees of freedom.

    Examples
    --------
    >>> summarize([1.0, 2.0])
    {'mean': 1.5}

    Notes
    -----
    Uses the statistics module.
    """
    mean = statistics.fmean(values)
    return {"mean": mean, "stdev": statistics.pstdev(values, mean) if ddof == 0 else statistics.stdev(values)}


class Tokenizer:
    """Splits text into tokens."""

    def tokens(self, text):
        """Return the tokens of the text."""

        def clean(token):
            return token.strip()

        return [clean(token) for token in text.split()]


def undocumented(a, *rest, **options):
    return a, rest, options
