"""Minimal async stand-ins for Playwright's Page and Locator."""


class FakeLocator:
    def __init__(
        self,
        text="",
        texts=None,
        children=None,
        wait_error=None,
        evaluate_error=None,
        scroll_error=None,
    ):
        self.text = text
        self.texts = texts or []
        self.children = children or {}
        self.wait_error = wait_error
        self.evaluate_error = evaluate_error
        self.scroll_error = scroll_error
        self.waited_for = []
        self.evaluated = []
        self.located = []
        self.scrolls = 0

    def locator(self, selector, **kwargs):
        self.located.append((selector, kwargs))
        return self.children.get(selector, self)

    async def wait_for(self, state="visible", timeout=None):
        self.waited_for.append(state)
        if self.wait_error:
            raise self.wait_error

    async def inner_text(self):
        return self.text

    async def text_content(self):
        return self.text

    async def all_text_contents(self):
        return list(self.texts)

    async def all(self):
        return [FakeLocator(text=t) for t in self.texts]

    async def scroll_into_view_if_needed(self, timeout=None):
        if self.scroll_error:
            raise self.scroll_error
        self.scrolls += 1

    async def evaluate_all(self, expression, arg=None):
        if self.evaluate_error:
            raise self.evaluate_error
        self.evaluated.append(arg)


class FakePage:
    def __init__(
        self,
        locator=None,
        locators=None,
        locator_error=None,
        wait_error=None,
        goto_error=None,
    ):
        self.url = "about:blank"
        self._locator = locator or FakeLocator()
        self._locators = locators or {}
        self.locator_error = locator_error
        self.wait_error = wait_error
        self.goto_error = goto_error
        self.located = []

    def locator(self, selector, **kwargs):
        self.located.append((selector, kwargs))
        if self.locator_error:
            raise self.locator_error
        return self._locators.get(selector, self._locator)

    async def wait_for_selector(self, selector, state="visible", timeout=None):
        if self.wait_error:
            raise self.wait_error

    async def goto(self, url, timeout=None):
        if self.goto_error:
            raise self.goto_error
        self.url = url
