"""Sample feed documents and a canned fetcher shared by the test modules."""
from jobfeed.errors import UpstreamUnavailable
from jobfeed.fetch import RawFeedDocument

FEED_URL = "https://feed.test/listofportaljobs.jsp"

SAMPLE_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<outertag>
  <jobs>
    <job>
      <jobdivaid>27142402</jobdivaid>
      <jobdiva_no>26-00066</jobdiva_no>
      <title>Kofax Developer- GDOL</title>
      <company>AppSixer LLC</company>
      <city>Atlanta</city>
      <state_abbr>GA</state_abbr>
      <jobdescription_400char><![CDATA[Kofax &amp; KTA developer &middot; 8+ years]]></jobdescription_400char>
      <issuedate>2026-01-16 17:30:05.0</issuedate>
      <portal_url>https://www2.jobdiva.com/portal/?a=1</portal_url>
      <positiontype>Contract</positiontype>
    </job>
    <job>
      <jobdivaid>27142555</jobdivaid>
      <jobdiva_no>26-00071</jobdiva_no>
      <title>Senior Data Engineer</title>
      <city>Chicago</city>
      <state_abbr>IL</state_abbr>
      <issuedate>2026-01-18 09:00:00.0</issuedate>
      <positiontype>Full-time</positiontype>
    </job>
    <job>
      <jobdivaid>00731</jobdivaid>
      <title>QA Analyst</title>
      <state_abbr>TX</state_abbr>
      <issuedate>2026-01-20 12:00:00.0</issuedate>
    </job>
  </jobs>
</outertag>
"""

SINGLE_JOB_FEED = """<outertag><jobs><job>
<jobdivaid>555</jobdivaid><title>Solo Role</title>
</job></jobs></outertag>"""

EMPTY_FEED = "<outertag><jobs></jobs></outertag>"

# Well-formed, but no structural path or job-like list matches.
PATTERN_ONLY_FEED = """<feed>
  <job><jobdivaid>901</jobdivaid><title><![CDATA[Pattern Role]]></title><city>Austin</city></job>
</feed>"""

# A bare "&" makes this invalid XML, but both <job> blocks are still readable.
MALFORMED_WITH_JOBS_FEED = """<outertag><jobs>
<job><jobdivaid>3001</jobdivaid><title>R&D Engineer</title><city>Boston</city><state_abbr>MA</state_abbr></job>
<job><jobdivaid>3002</jobdivaid><title>Support Analyst</title></job>
</jobs></outertag>"""

DEEP_FEED = "<a>" * 5000 + "x" + "</a>" * 5000


class StaticFetcher:
    """Stands in for :class:`jobfeed.fetch.Fetcher`, serving a fixed body."""

    def __init__(self, text: str = SAMPLE_FEED, fail: str | None = None):
        self.text = text
        self.fail = fail
        self.calls = 0

    def get(self, url: str) -> RawFeedDocument:
        self.calls += 1
        if self.fail:
            raise UpstreamUnavailable(self.fail)
        return RawFeedDocument(url=url, status=200, text=self.text)

