"""
Unit tests for doctoc.render.markdown_renderer module.
"""
from doctoc.core import Node
from doctoc.render import BaseRenderer, MarkdownRenderer


class TestMarkdownRenderer:
    """Tests for MarkdownRenderer."""
    
    def test_is_renderer(self):
        """Test it implements the renderer interface."""
        assert isinstance(MarkdownRenderer(), BaseRenderer)
    
    def test_render_body_html(self):
        """Test Markdown is rendered to HTML."""
        html = MarkdownRenderer().render_body("# Title\n\nSome **bold** text")
        
        assert "<h1" in html
        assert "Title</h1>" in html
        assert "<strong>bold</strong>" in html
    
    def test_fenced_code(self):
        """Test fenced code blocks are supported."""
        html = MarkdownRenderer().render_body("```\nprint('hi')\n```")
        
        assert "<code>" in html
    
    def test_plain_text_strips_markup(self):
        """Test plain text has no tags or Markdown syntax."""
        text = MarkdownRenderer().render_plain_text("# Title\n\nSome **bold** [link](http://x)")
        
        assert "<" not in text
        assert "**" not in text
        assert "Title" in text
        assert "Some bold link" in text
    
    def test_render_converts_once(self, monkeypatch):
        """Test render derives plain text from a single conversion."""
        renderer = MarkdownRenderer()
        conversions = []
        original = renderer.render_body

        def _counting(body):
            conversions.append(body)
            return original(body)

        monkeypatch.setattr(renderer, "render_body", _counting)

        html, text = renderer.render("Some **bold** text")

        assert len(conversions) == 1
        assert html == "<p>Some <strong>bold</strong> text</p>"
        assert text == "Some bold text"

    def test_custom_extensions(self):
        """Test extensions can be overridden."""
        renderer = MarkdownRenderer(extensions=[])
        
        assert renderer.extensions == []
        assert renderer.render_body("plain") == "<p>plain</p>"
    
    def test_node_with_markdown(self, temp_dir):
        """Test a node rendered with Markdown is searchable in lowercase."""
        path = temp_dir / "intro.md"
        path.write_text("---\nname: Intro\n---\n# Install NOW\n\nRun `make`.", encoding="utf-8")
        node = Node(name="intro", file_name=str(path), renderer=MarkdownRenderer())
        
        node.reload_content()
        
        assert node.title == "Intro"
        assert "Install NOW" in node.content()
        assert "install now" in node.text
        assert "run make." in node.text
