"""
Tests for the format loaders and the loader registry.
"""

import shutil
import tempfile
import textwrap
from pathlib import Path

import pytest
from openpyxl import Workbook

from translationloader.domain.catalogue import MessageCatalogue
from translationloader.domain.errors import LoadError, UnsupportedFormatError
from translationloader.infrastructure.loaders import FileLoader, LoaderRegistry, flatten_messages
from translationloader.infrastructure.loaders.csv_loader import CsvFileLoader
from translationloader.infrastructure.loaders.ini_loader import IniFileLoader
from translationloader.infrastructure.loaders.json_loader import JsonFileLoader
from translationloader.infrastructure.loaders.php_loader import PhpFileLoader
from translationloader.infrastructure.loaders.po_loader import PoFileLoader
from translationloader.infrastructure.loaders.xliff_loader import XliffFileLoader
from translationloader.infrastructure.loaders.xlsx_loader import XlsxFileLoader
from translationloader.infrastructure.loaders.yaml_loader import YamlFileLoader


class StaticLoader(FileLoader):
    """Loader returning fixed messages, for registry tests."""

    name = "static"

    def _read(self, path):
        return {"static": "yes"}


class LoaderTestBase:
    def setup_method(self):
        self.temp_dir = Path(tempfile.mkdtemp())

    def teardown_method(self):
        shutil.rmtree(self.temp_dir)

    def write(self, filename: str, content: str) -> Path:
        path = self.temp_dir / filename
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path


class TestFlattenMessages:
    def test_nested_keys_are_dotted(self):
        assert flatten_messages({"form": {"submit": "Send", "reset": {"label": "Reset"}}}) == {
            "form.submit": "Send",
            "form.reset.label": "Reset",
        }

    def test_scalars_become_strings(self):
        assert flatten_messages({"count": 3, "empty": None}) == {"count": "3", "empty": ""}

    def test_lists_use_index(self):
        assert flatten_messages({"days": ["Mon", "Tue"]}) == {"days.0": "Mon", "days.1": "Tue"}


class TestYamlFileLoader(LoaderTestBase):
    def test_load_nested(self):
        path = self.write("messages.en.yml", """
            greeting: Hello
            form:
              submit: Send
        """)

        catalogue = YamlFileLoader().load(path, "en", "messages")

        assert isinstance(catalogue, MessageCatalogue)
        assert catalogue.locale == "en"
        assert catalogue.entries("messages") == {"greeting": "Hello", "form.submit": "Send"}

    def test_empty_file_gives_empty_catalogue(self):
        path = self.write("messages.en.yml", "")
        assert len(YamlFileLoader().load(path, "en")) == 0

    def test_invalid_yaml_raises_load_error(self):
        path = self.write("messages.en.yml", "greeting: [unclosed\n")
        with pytest.raises(LoadError) as excinfo:
            YamlFileLoader().load(path, "en")
        assert excinfo.value.path == path

    def test_non_mapping_root_raises_load_error(self):
        path = self.write("messages.en.yml", "- a\n- b\n")
        with pytest.raises(LoadError):
            YamlFileLoader().load(path, "en")

    def test_missing_file_raises_load_error(self):
        with pytest.raises(LoadError):
            YamlFileLoader().load(self.temp_dir / "missing.en.yml", "en")


class TestXliffFileLoader(LoaderTestBase):
    def test_xliff_12(self):
        path = self.write("messages.de.xlf", """\
            <?xml version="1.0" encoding="utf-8"?>
            <xliff version="1.2" xmlns="urn:oasis:names:tc:xliff:document:1.2">
              <file source-language="en" target-language="de" datatype="plaintext" original="file.ext">
                <body>
                  <trans-unit id="1">
                    <source>greeting</source>
                    <target>Hallo</target>
                  </trans-unit>
                  <trans-unit id="2" resname="form.submit">
                    <source>Send</source>
                    <target>Senden</target>
                  </trans-unit>
                  <trans-unit id="3">
                    <source>untranslated</source>
                  </trans-unit>
                </body>
              </file>
            </xliff>
        """)

        catalogue = XliffFileLoader().load(path, "de", "messages")

        assert catalogue.entries("messages") == {
            "greeting": "Hallo",
            "form.submit": "Senden",
            "untranslated": "untranslated",
        }

    def test_xliff_20(self):
        path = self.write("messages.fr.xlf", """\
            <?xml version="1.0" encoding="utf-8"?>
            <xliff xmlns="urn:oasis:names:tc:xliff:document:2.0" version="2.0" srcLang="en" trgLang="fr">
              <file id="messages.fr">
                <unit id="a1" name="greeting">
                  <segment>
                    <source>Hello</source>
                    <target>Bonjour</target>
                  </segment>
                </unit>
              </file>
            </xliff>
        """)

        catalogue = XliffFileLoader().load(path, "fr")

        assert catalogue.entries("messages") == {"greeting": "Bonjour"}

    def test_malformed_xml_raises_load_error(self):
        path = self.write("messages.de.xlf", "<xliff><file>")
        with pytest.raises(LoadError):
            XliffFileLoader().load(path, "de")

    def test_wrong_root_raises_load_error(self):
        path = self.write("messages.de.xlf", "<html></html>")
        with pytest.raises(LoadError):
            XliffFileLoader().load(path, "de")


class TestPhpFileLoader(LoaderTestBase):
    def test_array_syntax(self):
        path = self.write("messages.en.php", """\
            <?php
            // comment
            return array(
                'greeting' => 'Hello',
                "quoted" => "Say \\"hi\\"",
                'escaped' => 'It\\'s',
                'form' => array(
                    'submit' => 'Send',
                ),
            );
        """)

        catalogue = PhpFileLoader().load(path, "en")

        assert catalogue.entries("messages") == {
            "greeting": "Hello",
            "quoted": 'Say "hi"',
            "escaped": "It's",
            "form.submit": "Send",
        }

    def test_short_array_syntax(self):
        path = self.write("messages.en.php", """\
            <?php
            return [
                'nav' => ['home' => 'Home', 'about' => 'About'],
                'count' => 3,
                'enabled' => true,
                'nothing' => null,
            ];
        """)

        catalogue = PhpFileLoader().load(path, "en")

        assert catalogue.entries("messages") == {
            "nav.home": "Home",
            "nav.about": "About",
            "count": "3",
            "enabled": "1",
            "nothing": "",
        }

    def test_list_entries_get_numeric_keys(self):
        path = self.write("messages.en.php", "<?php return ['days' => ['Mon', 'Tue']];")
        catalogue = PhpFileLoader().load(path, "en")
        assert catalogue.entries("messages") == {"days.0": "Mon", "days.1": "Tue"}

    def test_array_keyword_is_case_insensitive(self):
        path = self.write("messages.en.php", "<?php RETURN ARRAY('a' => Array('b' => 'c'));")
        catalogue = PhpFileLoader().load(path, "en")
        assert catalogue.entries("messages") == {"a.b": "c"}

    def test_code_is_rejected(self):
        path = self.write("messages.en.php", "<?php return array('a' => strtoupper('b'));")
        with pytest.raises(LoadError):
            PhpFileLoader().load(path, "en")

    def test_unterminated_array_raises_load_error(self):
        path = self.write("messages.en.php", "<?php return array('a' => 'b',")
        with pytest.raises(LoadError):
            PhpFileLoader().load(path, "en")


class TestIniFileLoader(LoaderTestBase):
    def test_top_level_and_sections(self):
        path = self.write("messages.en.ini", """\
            ; comment
            greeting = "Hello"
            farewell = Bye

            [form]
            submit = Send
        """)

        catalogue = IniFileLoader().load(path, "en")

        assert catalogue.entries("messages") == {
            "greeting": "Hello",
            "farewell": "Bye",
            "form.submit": "Send",
        }

    def test_key_case_preserved(self):
        path = self.write("messages.en.ini", "Greeting = Hello\n")
        assert IniFileLoader().load(path, "en").entries("messages") == {"Greeting": "Hello"}

    def test_inline_comments_stripped(self):
        path = self.write("messages.en.ini", "greeting = Hello ; shown on the home page\npunct = Hi;there\n")
        assert IniFileLoader().load(path, "en").entries("messages") == {
            "greeting": "Hello",
            "punct": "Hi;there",
        }

    def test_invalid_ini_raises_load_error(self):
        path = self.write("messages.en.ini", "[form\nsubmit = Send\n")
        with pytest.raises(LoadError):
            IniFileLoader().load(path, "en")


class TestJsonFileLoader(LoaderTestBase):
    def test_nested_json(self):
        path = self.write("messages.en.json", '{"greeting": "Hi", "form": {"submit": "Send"}}')
        catalogue = JsonFileLoader().load(path, "en")
        assert catalogue.entries("messages") == {"greeting": "Hi", "form.submit": "Send"}

    def test_invalid_json_raises_load_error(self):
        path = self.write("messages.en.json", '{"greeting": ')
        with pytest.raises(LoadError):
            JsonFileLoader().load(path, "en")


class TestCsvFileLoader(LoaderTestBase):
    def test_rows(self):
        path = self.write("messages.en.csv", """\
            # comment
            greeting;Hello
            quoted;"Hello; World"
            too;many;columns
        """)

        catalogue = CsvFileLoader().load(path, "en")

        assert catalogue.entries("messages") == {
            "greeting": "Hello",
            "quoted": "Hello; World",
        }


class TestPoFileLoader(LoaderTestBase):
    def test_entries(self):
        path = self.write("messages.de.po", """\
            msgid ""
            msgstr ""
            "Content-Type: text/plain; charset=UTF-8\\n"

            msgid "greeting"
            msgstr "Hallo"

            msgid "untranslated"
            msgstr ""

            msgid "apple"
            msgid_plural "apples"
            msgstr[0] "Apfel"
            msgstr[1] "Äpfel"

            #~ msgid "old"
            #~ msgstr "alt"
        """)

        catalogue = PoFileLoader().load(path, "de")

        assert catalogue.entries("messages") == {
            "greeting": "Hallo",
            "untranslated": "untranslated",
            "apple": "Apfel|Äpfel",
        }


class TestXlsxFileLoader(LoaderTestBase):
    def _workbook(self, rows) -> Path:
        wb = Workbook()
        ws = wb.active
        for row in rows:
            ws.append(row)
        path = self.temp_dir / "messages.en.xlsx"
        wb.save(path)
        return path

    def test_rows_with_header(self):
        path = self._workbook([
            ("key", "message"),
            ("greeting", "Hello"),
            ("count", 3),
            (None, "ignored"),
        ])

        catalogue = XlsxFileLoader().load(path, "en")

        assert catalogue.entries("messages") == {"greeting": "Hello", "count": "3"}

    def test_not_a_workbook_raises_load_error(self):
        path = self.write("messages.en.xlsx", "not a zip file")
        with pytest.raises(LoadError):
            XlsxFileLoader().load(path, "en")


class TestLoaderRegistry(LoaderTestBase):
    def test_default_registry_formats(self):
        formats = LoaderRegistry.default().formats()
        for extension in ("yml", "yaml", "xlf", "xliff", "php", "ini", "json", "csv", "po", "xlsx"):
            assert extension in formats

    def test_resolve_builtin(self):
        registry = LoaderRegistry({"yml": "yaml"})
        assert isinstance(registry.resolve("yml"), YamlFileLoader)

    def test_resolve_is_cached(self):
        registry = LoaderRegistry({"yml": "yaml"})
        assert registry.resolve("yml") is registry.resolve("yml")

    def test_resolve_is_case_sensitive(self):
        registry = LoaderRegistry({"yml": "yaml"})
        with pytest.raises(UnsupportedFormatError):
            registry.resolve("YML")

    def test_unknown_extension_raises(self):
        with pytest.raises(UnsupportedFormatError) as excinfo:
            LoaderRegistry({"yml": "yaml"}).resolve("xlf")
        assert excinfo.value.extension == "xlf"

    def test_unknown_loader_name_raises(self):
        with pytest.raises(UnsupportedFormatError):
            LoaderRegistry({"yml": "toml"}).resolve("yml")

    def test_import_path_spec(self):
        registry = LoaderRegistry({"txt": f"{__name__}:StaticLoader"})
        assert isinstance(registry.resolve("txt"), StaticLoader)

    def test_bad_import_path_raises(self):
        registry = LoaderRegistry({"txt": "no_such_module_xyz:Loader"})
        with pytest.raises(UnsupportedFormatError):
            registry.resolve("txt")

    def test_non_loader_class_raises(self):
        registry = LoaderRegistry({"txt": "pathlib:Path"})
        with pytest.raises(UnsupportedFormatError):
            registry.resolve("txt")

    def test_register_class_and_instance(self):
        registry = LoaderRegistry()
        instance = StaticLoader()
        registry.register("a", StaticLoader)
        registry.register("b", instance)

        assert isinstance(registry.resolve("a"), StaticLoader)
        assert registry.resolve("b") is instance
        assert "a" in registry
        assert registry.formats() == ["a", "b"]

    def test_register_replaces_cached_loader(self):
        registry = LoaderRegistry({"yml": "yaml"})
        registry.resolve("yml")
        registry.register("yml", StaticLoader)
        assert isinstance(registry.resolve("yml"), StaticLoader)

    def test_describe(self):
        registry = LoaderRegistry({"yml": "yaml", "txt": StaticLoader})
        assert registry.describe() == {"txt": "StaticLoader", "yml": "yaml"}
