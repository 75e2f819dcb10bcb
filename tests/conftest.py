"""Pytest configuration and fixtures."""

import pytest

EFETCH_ARTICLE_XML = """\
<?xml version="1.0" ?>
<!DOCTYPE PubmedArticleSet PUBLIC "-//NLM//DTD PubMedArticle, 1st January 2024//EN" "https://dtd.nlm.nih.gov/ncbi/pubmed/out/pubmed_240101.dtd">
<PubmedArticleSet>
  <PubmedArticle>
    <MedlineCitation Status="MEDLINE" Owner="NLM">
      <PMID Version="1">38472913</PMID>
      <Article PubModel="Print-Electronic">
        <Journal>
          <ISSN IssnType="Electronic">1533-4406</ISSN>
          <JournalIssue CitedMedium="Internet">
            <Volume>390</Volume>
            <PubDate>
              <Year>2024</Year>
              <Month>Mar</Month>
            </PubDate>
          </JournalIssue>
          <Title>The New England journal of medicine</Title>
          <ISOAbbreviation>N Engl J Med</ISOAbbreviation>
        </Journal>
        <ArticleTitle>Semaglutide in <i>NASH</i>: a phase 3 trial.</ArticleTitle>
        <Abstract>
          <AbstractText Label="BACKGROUND" NlmCategory="BACKGROUND">NASH is prevalent.</AbstractText>
          <AbstractText Label="RESULTS" NlmCategory="RESULTS">Fibrosis improved.</AbstractText>
        </Abstract>
        <AuthorList CompleteYN="Y">
          <Author ValidYN="Y">
            <LastName>Newsome</LastName>
            <ForeName>Philip N</ForeName>
            <Initials>PN</Initials>
          </Author>
          <Author ValidYN="Y">
            <LastName>Harrison</LastName>
            <ForeName>Stephen A</ForeName>
          </Author>
        </AuthorList>
      </Article>
      <KeywordList Owner="NOTNLM">
        <Keyword MajorTopicYN="N">NASH</Keyword>
        <Keyword MajorTopicYN="N">semaglutide</Keyword>
      </KeywordList>
    </MedlineCitation>
    <PubmedData>
      <ArticleIdList>
        <ArticleId IdType="pubmed">38472913</ArticleId>
        <ArticleId IdType="doi">10.1056/NEJMoa2312345</ArticleId>
        <ArticleId IdType="pii">NEJMoa2312345</ArticleId>
      </ArticleIdList>
    </PubmedData>
  </PubmedArticle>
</PubmedArticleSet>
"""

EMPTY_EFETCH_XML = """\
<?xml version="1.0" ?>
<PubmedArticleSet>
</PubmedArticleSet>
"""


@pytest.fixture
def efetch_article_xml() -> str:
    """A single-article efetch response."""
    return EFETCH_ARTICLE_XML


@pytest.fixture
def empty_efetch_xml() -> str:
    """efetch response for a PMID PubMed does not know."""
    return EMPTY_EFETCH_XML


@pytest.fixture
def esummary_result() -> dict:
    """The `result` mapping of an esummary response for two PMIDs."""
    return {
        "uids": ["38472913", "22222222"],
        "38472913": {
            "uid": "38472913",
            "pubdate": "2024 Mar 21",
            "source": "N Engl J Med",
            "fulljournalname": "The New England journal of medicine",
            "authors": [
                {"name": "Newsome PN", "authtype": "Author"},
                {"name": "Harrison SA", "authtype": "Author"},
            ],
            "title": "Semaglutide in NASH: a phase 3 trial.",
            "elocationid": "doi: 10.1056/NEJMoa2312345",
        },
        "22222222": {
            "uid": "22222222",
            "pubdate": "",
            "source": "Nat Rev Drug Discov",
            "title": "GLP-1 receptor agonists review",
        },
    }
