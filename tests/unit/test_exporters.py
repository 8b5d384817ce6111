"""Unit tests for the Home Assistant and linknx exporters."""

import yaml

from ets_to_hass.entity_resolver import EntityResolver
from ets_to_hass.exporters.homeassistant_exporter import HomeAssistantExporter
from ets_to_hass.exporters.linknx_exporter import LinknxExporter
from ets_to_hass.model_builder import ModelBuilder
from ets_to_hass.models import AddressOverrides, GroupAddress, ProjectModel


def two_level_model():
    model = ProjectModel(address_style='TwoLevel')
    for ga_id, address, name in [('GA-1', '2/0', 'Two'), ('GA-2', '10/0', 'Ten'), ('GA-3', '1/5', 'One & <b>')]:
        model.addresses[ga_id] = GroupAddress(id=ga_id, name=name, address=address, datapoint_type='1.001')
    return model


class TestHomeAssistantExporter:
    """Test the grouped-by-kind view."""

    def test_grouped_view(self, config, sample_trees):
        result = EntityResolver(config).resolve(ModelBuilder.from_trees(sample_trees))
        view = HomeAssistantExporter(result).grouped_view()
        assert list(view) == ['light', 'cover', 'sensor']
        assert view['light'][0]['name'] == 'Ceiling'

    def test_wrapped_view(self, config, sample_trees):
        result = EntityResolver(config).resolve(ModelBuilder.from_trees(sample_trees))
        view = HomeAssistantExporter(result, wrap_knx=True).grouped_view()
        assert list(view) == ['knx']
        assert list(view['knx']) == ['light', 'cover', 'sensor']

    def test_render_yaml(self, config, sample_trees):
        result = EntityResolver(config).resolve(ModelBuilder.from_trees(sample_trees))
        text = HomeAssistantExporter(result).render()
        assert text.startswith('---\n')
        # keys keep the resolution order
        assert text.index('address: 1/0/1') < text.index('state_address: 1/0/2')
        assert yaml.safe_load(text)['cover'][0]['move_short_address'] == '1/1/2'

    def test_render_empty(self):
        from ets_to_hass.entity_resolver import ResolutionResult
        assert yaml.safe_load(HomeAssistantExporter(ResolutionResult()).render()) == {}


class TestLinknxExporter:
    """Test the flat address view."""

    def test_sorted_as_strings(self):
        view = LinknxExporter(two_level_model()).address_view()
        assert [d['address'] for d in view] == ['1/5', '10/0', '2/0']

    def test_descriptor(self):
        view = LinknxExporter(two_level_model()).address_view()
        assert view[1] == {'id': 'id_10_0', 'address': '10/0', 'datapoint_type': '1.001', 'display_name': 'Ten'}

    def test_display_name_override(self):
        model = two_level_model()
        model.addresses['GA-2'].overrides = AddressOverrides(display_name='Ten overridden')
        view = LinknxExporter(model).address_view()
        assert view[1]['display_name'] == 'Ten overridden'

    def test_render(self):
        lines = LinknxExporter(two_level_model()).render().split('\n')
        assert lines[1] == '        <object type="1.001" id="id_10_0" gad="10/0" init="request">Ten</object>'
        assert lines[0].endswith('>One &amp; &lt;b&gt;</object>')

    def test_unused_addresses_are_exported(self, sample_trees):
        model = ModelBuilder.from_trees(sample_trees)
        addresses = [d['address'] for d in LinknxExporter(model).address_view()]
        assert '10/0/0' in addresses
        assert addresses == sorted(addresses)
        assert addresses.index('10/0/0') < addresses.index('2/0/1')
