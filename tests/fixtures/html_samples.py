"""
HTML samples shared by the tests.
"""

SCENARIO_MARKUP = '<div id="a"><span class="x">Hi</span><span class="y">Yo</span></div>'

ARTICLE_MARKUP = """<!DOCTYPE html>
<html>
<head><title>  Prices </title></head>
<body>
  <div id="main" class="content">
    <h1>Catalogue</h1>
    <ul class="items">
      <li class="item" data-price="1.234,5">Lamp <b>new</b></li>
      <li class="item sale" data-price="12">Chair</li>
      <li class="item">Desk</li>
    </ul>
    <p>Updated <span class="date">2001-01-02 at 13:00</span></p>
    <a href="/next" class="link">next</a>
    <img src="/logo.png" alt="">
  </div>
  <div class="content">
    <p>Second</p>
  </div>
</body>
</html>
"""
