from pathlib import Path
import sys

import pytest

sys.path.extend([str(Path(__file__).parent.parent / "src"), str(Path(__file__).parent)])
from objectfactory import ObjectFactory, ObjectFactoryRegister, register_object, FactoryProduct, KeyNotFound


def test_register_helper_registers_once():
    class Base:
        pass

    class Impl(Base):
        pass

    factory = ObjectFactory(Base)
    helper = ObjectFactoryRegister(factory, "impl", Impl)
    assert factory.is_registered("impl")
    assert isinstance(factory.create("impl"), Impl)
    assert not hasattr(helper, "__dict__")


def test_register_object_returns_class_unchanged():
    class Base:
        pass

    factory = ObjectFactory(Base)

    @register_object(factory, "impl")
    class Impl(Base):
        pass

    assert isinstance(Impl, type)
    assert Impl.__name__ == "Impl"
    assert isinstance(factory.create("impl"), Impl)


def test_sample_handlers_self_register():
    from sample_handlers.base import FormatHandler, HANDLERS
    from sample_handlers.json_handler import JsonHandler
    from sample_handlers.xml_handler import XmlHandler

    handlers = ObjectFactory.instance(FormatHandler)
    assert handlers is HANDLERS

    json_handler = handlers.create("json")
    assert isinstance(json_handler, JsonHandler)
    assert json_handler.dumps({"b": 1, "a": 2}) == '{"a": 2, "b": 1}'

    xml_handler = handlers.create("xml")
    assert isinstance(xml_handler, XmlHandler)
    assert xml_handler.dumps({"a": 1}) == "<data><a>1</a></data>"

    with pytest.raises(KeyNotFound, match="yaml"):
        handlers.create("yaml")
    assert handlers.is_registered("xml")
    assert not handlers.is_registered("yaml")
    assert set(handlers.get_objects()) == {"json", "xml"}


def test_factory_product_mixin():
    class Filter(FactoryProduct, factory_root=True):
        pass

    @Filter.register("identity")
    class Identity(Filter):
        pass

    @Filter.register("identity")
    class Other(Filter):
        pass

    assert Filter.factory() is ObjectFactory.instance(Filter)
    assert Identity.factory() is Filter.factory()
    assert isinstance(Filter.create("identity"), Identity)
    assert Filter.is_registered("identity")
    assert not Filter.is_registered("blur")
    with pytest.raises(KeyNotFound):
        Filter.create("blur")


def test_factory_product_key_type():
    class Opcode(FactoryProduct, factory_root=True, key_type=int):
        pass

    @Opcode.register(0x01)
    class Load(Opcode):
        pass

    assert Opcode.factory() is ObjectFactory.instance(Opcode, int)
    assert Opcode.factory() is not ObjectFactory.instance(Opcode)
    assert isinstance(Opcode.create(1), Load)


def test_factory_product_without_root():
    class Orphan(FactoryProduct):
        pass

    with pytest.raises(TypeError, match="factory_root"):
        Orphan.factory()
