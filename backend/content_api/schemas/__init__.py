# Schemas package init
