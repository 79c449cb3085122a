"""
XmlDefinitionReader

Reads bean definitions from an XML document::

    <beans>
        <bean id="userService" class="app.services.UserService">
            <constructor-arg ref="userRepository"/>
        </bean>
        <bean id="userRepository" class="app.repositories.UserRepository">
            <property name="database"/>
        </bean>
        <bean id="database" class="app.db.Database"/>
    </beans>

Every child element of the root is one bean, in document order.
``constructor-arg`` elements list constructor arguments by ``ref``;
``property`` elements list setter-injected properties by ``name``.
"""

import logging
import os
import xml.etree.ElementTree as ET
from typing import IO, List, Union

from .definition import BeanDefinition
from .exceptions import DefinitionParseError

logger = logging.getLogger(__name__)

Source = Union[str, os.PathLike, IO]


class XmlDefinitionReader:
    """Turn a ``<beans>`` document into BeanDefinitions.

    Example::

        definitions = XmlDefinitionReader().read("beans.xml")
        container = LazySingletonContainer(definitions=definitions)
    """

    def read(self, source: Source) -> List[BeanDefinition]:
        """Read definitions from a file path or file object.

        Raises:
            DefinitionParseError: When the file cannot be opened or parsed,
                or a bean lacks ``id`` or ``class``
        """
        try:
            root = ET.parse(source).getroot()
        except ET.ParseError as e:
            raise DefinitionParseError(f"Malformed bean definition XML: {e}") from e
        except OSError as e:
            raise DefinitionParseError(f"Cannot read bean definitions: {e}") from e
        return self._parse_beans(root)

    def read_string(self, text: str) -> List[BeanDefinition]:
        """Read definitions from XML text.

        Raises:
            DefinitionParseError: When the text cannot be parsed,
                or a bean lacks ``id`` or ``class``
        """
        try:
            root = ET.fromstring(text)
        except ET.ParseError as e:
            raise DefinitionParseError(f"Malformed bean definition XML: {e}") from e
        return self._parse_beans(root)

    def _parse_beans(self, root: ET.Element) -> List[BeanDefinition]:
        definitions = []
        for element in root:
            bean_id = element.get("id")
            class_name = element.get("class")
            if not bean_id:
                raise DefinitionParseError(
                    f"<{element.tag}> element without an 'id' attribute"
                )
            if not class_name:
                raise DefinitionParseError(
                    f"Bean '{bean_id}' has no 'class' attribute"
                )

            definition = BeanDefinition(bean_id, class_name)
            self._parse_constructor_args(element, definition)
            self._parse_properties(element, definition)
            definitions.append(definition)
        return definitions

    @staticmethod
    def _parse_constructor_args(element: ET.Element, definition: BeanDefinition) -> None:
        # An entry without a ref ends the argument list
        for arg in element.findall("constructor-arg"):
            ref = arg.get("ref")
            if not ref:
                logger.warning(
                    "Bean '%s': <constructor-arg> without 'ref', ignoring it and "
                    "any following arguments", definition.id,
                )
                return
            definition.add_constructor_arg(ref)

    @staticmethod
    def _parse_properties(element: ET.Element, definition: BeanDefinition) -> None:
        # An entry without a name ends the property list
        for prop in element.findall("property"):
            name = prop.get("name")
            if not name:
                logger.warning(
                    "Bean '%s': <property> without 'name', ignoring it and "
                    "any following properties", definition.id,
                )
                return
            definition.add_property(name)
