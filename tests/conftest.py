from textwrap import dedent

import pytest


@pytest.fixture
def example_file(tmpdir):
    data = dedent(
        """
        # Greeting
            #Hello,
            #  world
        """
    )

    filename = tmpdir.join("greeting.txt")
    filename.write(data)
    return filename


@pytest.fixture
def unmarked_file(tmpdir):
    data = "\n    |first\n    second\n"

    filename = tmpdir.join("unmarked.txt")
    filename.write(data)
    return filename
