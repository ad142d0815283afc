import threading

import pytest

import update_stations
from api.http_client import FetchError
from providers import SourceFormatError
from services import update
from services.update import UpdateConfig, collect_sources, run_update

NOAA_URL = "http://example.test/stations.txt"
OA_URL = "http://example.test/airports.csv"


@pytest.fixture
def sources(noaa_line, oa_csv, oa_row):
    noaa = "\n".join([
        "!   METAR stations",
        noaa_line(name="ANCHORAGE INTL", icao="PANC", lat="61 10N", lon="150 01W", country="US"),
        noaa_line(name="KENNEDY", icao="KJFK", lat="40 38N", lon="073 46W", country="US"),
        noaa_line(name="NO METAR", icao="KXXX", flag=" "),
        noaa_line(name="SOMEWHERE", icao="ZZZZ", lat="?? ??N", lon="??? ??W", country="XX"),
    ])
    oa = oa_csv(
        oa_row("KJFK", name="John F Kennedy International Airport", lat="40.639801",
               lon="-73.7789", country="US", municipality="New York", iata="JFK"),
        oa_row("PANC", name="Ted Stevens Anchorage International Airport", lat="",
               lon="", country="US", municipality="Anchorage", iata="ANC"),
        oa_row("EGLL", name="Heathrow", lat="51.47", lon="-0.46", country="GB", iata="LHR"),
    )
    return {NOAA_URL: noaa, OA_URL: oa}


@pytest.fixture
def fake_fetch(monkeypatch, sources):
    def install(errors=None):
        errors = errors or {}

        def _fetch(url, timeout_s, encoding="utf-8"):
            if url in errors:
                raise errors[url]
            return sources[url]

        monkeypatch.setattr(update, "fetch_text", _fetch)

    return install


@pytest.fixture
def config(ad_list_file):
    return UpdateConfig(primary_url=NOAA_URL, secondary_url=OA_URL,
                        output_path=str(ad_list_file), timeout_s=2)


def test_run_update_writes_merged_registry(fake_fetch, config, ad_list_file):
    fake_fetch()
    result = run_update(config)

    assert len(result.stations) == 3
    lines = ad_list_file.read_text(encoding="utf-8").splitlines()
    marker = lines.index("var AdList = []string{")
    assert lines[marker + 1:] == [
        '\t"KJFK;JFK;John F Kennedy International Airport (New York);US;40.640;-73.779",',
        '\t"PANC;ANC;Ted Stevens Anchorage International Airport (Anchorage);US;61.167;-150.017",',
        '\t"ZZZZ;;SOMEWHERE;XX;999.000;999.000",',
        "}",
    ]


def test_run_update_is_idempotent(fake_fetch, config, ad_list_file):
    fake_fetch()
    run_update(config)
    first = ad_list_file.read_bytes()
    run_update(config)
    assert ad_list_file.read_bytes() == first


@pytest.mark.parametrize("failing_url", [NOAA_URL, OA_URL])
def test_fetch_failure_leaves_registry_untouched(fake_fetch, config, ad_list_file, failing_url):
    before = ad_list_file.read_bytes()
    fake_fetch({failing_url: FetchError("http", failing_url, "HTTP error: 503", 503)})

    with pytest.raises(FetchError) as exc:
        run_update(config)
    assert exc.value.url == failing_url
    assert ad_list_file.read_bytes() == before


def test_zero_records_leaves_registry_untouched(fake_fetch, sources, config, ad_list_file):
    before = ad_list_file.read_bytes()
    sources[NOAA_URL] = "only a header"
    fake_fetch()

    with pytest.raises(SourceFormatError):
        run_update(config)
    assert ad_list_file.read_bytes() == before


def test_csv_shape_error_leaves_registry_untouched(fake_fetch, sources, config, ad_list_file):
    before = ad_list_file.read_bytes()
    sources[OA_URL] += "\n1,BROKEN,row"
    fake_fetch()

    with pytest.raises(SourceFormatError):
        run_update(config)
    assert ad_list_file.read_bytes() == before


def test_dry_run_does_not_write(fake_fetch, config, ad_list_file):
    before = ad_list_file.read_bytes()
    fake_fetch()
    result = run_update(config, dry_run=True)
    assert len(result.stations) == 3
    assert ad_list_file.read_bytes() == before


class _Source:
    def __init__(self, url, parse):
        self.url = url
        self.encoding = "utf-8"
        self.parse = parse


def test_collect_sources_waits_for_both(monkeypatch):
    release = threading.Event()
    finished = []

    def _fetch(url, timeout_s, encoding="utf-8"):
        if url == "slow":
            release.wait(5)
            finished.append(url)
            return "slow"
        release.set()
        raise FetchError("network", url, "connection refused")

    monkeypatch.setattr(update, "fetch_text", _fetch)
    primary = _Source("fast", lambda text: {"A": text})
    secondary = _Source("slow", lambda text: {"B": text})

    with pytest.raises(FetchError) as exc:
        collect_sources(primary, secondary, 1)
    assert exc.value.url == "fast"
    assert finished == ["slow"]


def test_main_success_prints_summary(fake_fetch, ad_list_file, capsys):
    fake_fetch()
    code = update_stations.main([
        "--primary-url", NOAA_URL, "--secondary-url", OA_URL, "--output", str(ad_list_file),
    ])
    assert code == 0
    assert "3 records updated in" in capsys.readouterr().out


def test_main_dry_run_prints_records(fake_fetch, ad_list_file, capsys):
    before = ad_list_file.read_bytes()
    fake_fetch()
    code = update_stations.main([
        "--primary-url", NOAA_URL, "--secondary-url", OA_URL,
        "--output", str(ad_list_file), "--dry-run",
    ])
    out = capsys.readouterr().out
    assert code == 0
    assert out.splitlines()[0].startswith('\t"KJFK;JFK;')
    assert out.endswith("}\n")
    assert ad_list_file.read_bytes() == before


def test_main_failure_exits_nonzero(fake_fetch, ad_list_file):
    before = ad_list_file.read_bytes()
    fake_fetch({OA_URL: FetchError("timeout", OA_URL, "timeout tras 2s")})
    code = update_stations.main([
        "--primary-url", NOAA_URL, "--secondary-url", OA_URL, "--output", str(ad_list_file),
    ])
    assert code == 1
    assert ad_list_file.read_bytes() == before


def test_main_rejects_bad_timeout():
    with pytest.raises(SystemExit):
        update_stations.main(["--timeout", "0"])
