"""content_scrape.crawler: загрузка страниц, разрешение источников URL и параллельный обход."""
