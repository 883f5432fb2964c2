"""codelock — generated files with hand-editable manual sections.

Generated files carry a lock docblock at offset 0 holding a hash of the
generated content:

    /**
     * This file is generated with manually editable sections. Only make
     * modifications between BEGIN MANUAL SECTION and END MANUAL SECTION
     * designators.
     *
     * @generated-editable Codelock<<HASH>>
     */

Regions between the designators survive regeneration:

    /* BEGIN MANUAL SECTION custom_fields */
    ...
    /* END MANUAL SECTION */

Anything outside these designators is covered by the hash.
"""

__version__ = "0.3.0"

# Designator constants used by the manual-section codec and the builder
BEGIN_DESIGNATOR = "BEGIN MANUAL SECTION"
END_DESIGNATOR = "END MANUAL SECTION"

# Lock tags written on the last line of the lock docblock
EDITABLE_TAG = "@generated-editable"
UNEDITABLE_TAG = "@generated"

ManualSectionMap = dict[str, str]
