"""Facade, real world: downloading and converting a video in one call.

`YouTubeDownloader` hides the fetch/convert/save dance behind
`download_video(url)`. The subsystems here only print what they would do.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import parse_qs, urlparse


@dataclass
class VideoInfo:
    url: str
    id: str
    title: str


class YouTube:
    @staticmethod
    def fetch_video(url: str) -> VideoInfo:
        print(f"Fetching video metadata from youtube for {url}...")
        query = parse_qs(urlparse(url).query)
        video_id = query.get("v", ["unknown"])[0]
        return VideoInfo(url=url, id=video_id, title=f"Video {video_id}")

    @staticmethod
    def save_as(video: VideoInfo, path: str) -> None:
        print(f"Saving video file to a temporary file: {path}")


class FFMpegVideo:
    def __init__(self, path: str) -> None:
        self.path = path

    def filters(self) -> "FFMpegVideo":
        print("Applying filters...")
        return self

    def resize(self, width: int, height: int) -> "FFMpegVideo":
        print(f"Resizing to {width}x{height}...")
        return self

    def synchronize(self) -> "FFMpegVideo":
        print("Synchronizing audio and video...")
        return self

    def save(self, path: str) -> None:
        print(f"Saving video in target formats: {path}")


class FFMpeg:
    @staticmethod
    def create() -> "FFMpeg":
        print("Starting ffmpeg...")
        return FFMpeg()

    def open(self, path: str) -> FFMpegVideo:
        print(f"Opening video at {path}")
        return FFMpegVideo(path)


class YouTubeDownloader:
    def __init__(self, youtube: YouTube | None = None, ffmpeg: FFMpeg | None = None) -> None:
        self.youtube = youtube or YouTube()
        self.ffmpeg = ffmpeg or FFMpeg.create()

    def download_video(self, url: str) -> str:
        video = self.youtube.fetch_video(url)
        tmp_path = f"/tmp/{video.id}.part"
        self.youtube.save_as(video, tmp_path)

        target = f"{video.id}.mp4"
        (
            self.ffmpeg.open(tmp_path)
            .filters()
            .resize(320, 200)
            .synchronize()
            .save(target)
        )
        print("Done!")
        return target


def client_code(facade: YouTubeDownloader) -> None:
    facade.download_video("https://www.youtube.com/watch?v=QH2-TGUlwu4")


def main() -> None:
    client_code(YouTubeDownloader())


if __name__ == "__main__":
    main()
