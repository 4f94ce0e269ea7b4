"""Console progress reporting for batch image scanning."""
from typing import Iterable, Iterator, TypeVar


T = TypeVar("T")


class ProgressPrinter:
    """In-place "Task...X/Y" counter for a batch of known size.

    Example:
        >>> progress = ProgressPrinter("Scanning images", 3)
        >>> for image in progress.track(images):
        ...     read_cipher_image(image)
        Scanning images...Done!
    """

    def __init__(self, task_name: str, total: int):
        self.task_name = task_name
        self.total = total

    def update(self, current: int) -> None:
        """Show the 1-based number of the item being processed."""
        # \r rewrites the same console line instead of scrolling
        print(f"{self.task_name}...{current}/{self.total}", end="\r", flush=True)

    def done(self) -> None:
        # Trailing spaces clear leftover digits of the counter
        print(f"{self.task_name}...Done!    ")

    def track(self, items: Iterable[T]) -> Iterator[T]:
        """Yield items while updating the counter, then mark the task done."""
        for i, item in enumerate(items):
            self.update(i + 1)
            yield item
        self.done()
