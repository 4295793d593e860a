"""
Example: multipart/form-data uploads against httpbin.

Shows the three entry points:
- MultipartBuilder for a (content_type, body) pair you send yourself
- post(url).send_multipart_file() for a single file
- MultipartRequest.send_multipart() with a shared requests.Session
"""

import tempfile
from pathlib import Path

import click
import requests

from multipart_post import FilePart, MultipartBuilder, MultipartRequest, TextPart, post


def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "1.txt"
        path.write_bytes(b"hello")

        content_type, data = (
            MultipartBuilder()
            .add_file("test", path)
            .add_text("name", "value")
            .finish()
        )
        r = requests.post(
            "https://httpbin.org/post", headers={"Content-Type": content_type}, data=data
        )
        click.secho(f"Builder upload status: {r.status_code}", fg="green")

        r = post("https://httpbin.org/post", timeout=10).send_multipart_file("name", path)
        click.secho(f"send_multipart_file status: {r.status_code} files={r.json()['files']}", fg="green")

        with requests.Session() as s:
            upload = MultipartRequest("PUT", "https://httpbin.org/put", session=s)
            r1 = upload.send_multipart([TextPart("a", "1")])
            r2 = upload.send_multipart([FilePart("f", "b.txt", b"b", "text/plain")])
            click.secho(f"Session reuse statuses: {r1.status_code} {r2.status_code}", fg="green")

        try:
            post("https://httpbin.org/post").send_multipart_file("name", Path(tmp) / "missing.txt")
        except FileNotFoundError as exc:
            click.secho(f"Not sent: {exc}", fg="yellow")


if __name__ == "__main__":
    main()
