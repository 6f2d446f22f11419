from xml.etree import ElementTree

from pydantic import ValidationError

from src.runthrough.domain.models import CatalogError, Track
from src.runthrough.domain.ports import ICatalogRepository
from src.shared.telemetry import Telemetry, measure_time


class GnuPodCatalogRepository(ICatalogRepository):
    """
    Catalog backed by a GNUpod XML database (GNUtunesDB.xml).

    Layout:
        <gnuPod>
          <files><file id=".." title=".." album=".." rating=".." .../></files>
          <playlist name=".." plid=".."><add id=".."/>...</playlist>
        </gnuPod>

    The whole document is kept in memory; playlist changes are only
    written back by `write()`.
    """

    NUMERIC_FIELDS = ("id", "rating", "playcount", "lastplay")
    TEXT_FIELDS = ("title", "album")

    def __init__(self, path: str) -> None:
        self.path = path
        self.telemetry = Telemetry("GnuPodCatalogRepository")
        self._tree = self._load(path)

    def _load(self, path: str) -> ElementTree.ElementTree:
        try:
            return ElementTree.parse(path)
        except (ElementTree.ParseError, OSError) as e:
            raise CatalogError(f"Cannot read GNUpod database {path}: {e}") from e

    @property
    def root(self) -> ElementTree.Element:
        return self._tree.getroot()

    @staticmethod
    def _parse_number(element: ElementTree.Element, key: str) -> int:
        # GNUpod omits or blanks attributes it has no value for
        raw = element.get(key)
        if raw is None or raw.strip() == "":
            return 0
        try:
            return int(raw)
        except ValueError as e:
            raise CatalogError(
                f"Attribute {key}={raw!r} is not a number in {element.attrib}"
            ) from e

    def _to_track(self, element: ElementTree.Element) -> Track:
        fields: dict[str, int | str] = {
            key: self._parse_number(element, key) for key in self.NUMERIC_FIELDS
        }
        for key in self.TEXT_FIELDS:
            fields[key] = element.get(key) or ""
        try:
            return Track.model_validate(fields)
        except ValidationError as e:
            raise CatalogError(f"Invalid track {element.attrib}: {e}") from e

    @measure_time("load_catalog")
    def get_tracks(self) -> list[Track]:
        tracks = [self._to_track(el) for el in self.root.findall("files/file")]

        seen: set[int] = set()
        for track in tracks:
            if track.id in seen:
                raise CatalogError(f"Duplicate track id {track.id} in {self.path}")
            seen.add(track.id)

        self.telemetry.log_info("Catalog Loaded", path=self.path, tracks=len(tracks))
        return tracks

    def _find_playlist(self, name: str) -> ElementTree.Element | None:
        for playlist in self.root.findall("playlist"):
            if playlist.get("name") == name:
                return playlist
        return None

    def save_playlist(self, name: str, track_ids: list[int]) -> None:
        existing = self._find_playlist(name)

        attrs = {"name": name}
        if existing is not None and existing.get("plid"):
            attrs["plid"] = existing.get("plid", "")

        playlist = ElementTree.Element("playlist", attrs)
        for track_id in track_ids:
            ElementTree.SubElement(playlist, "add", {"id": str(track_id)})

        if existing is not None:
            position = list(self.root).index(existing)
            self.root.remove(existing)
            self.root.insert(position, playlist)
        else:
            self.root.append(playlist)

        self.telemetry.log_info(
            "Playlist Saved",
            name=name,
            tracks=len(track_ids),
            replaced=existing is not None,
        )

    def dump(self) -> str:
        ElementTree.indent(self._tree)
        return ElementTree.tostring(
            self.root, encoding="unicode", xml_declaration=True
        )

    def write(self, path: str | None = None) -> str:
        target = path or self.path
        ElementTree.indent(self._tree)
        try:
            self._tree.write(target, encoding="utf-8", xml_declaration=True)
        except OSError as e:
            raise CatalogError(f"Cannot write GNUpod database {target}: {e}") from e
        self.telemetry.log_info("Database Written", path=target)
        return target
