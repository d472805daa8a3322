"""Embedded word list for the dictionary's degraded fallback mode."""

FALLBACK_WORDS = """
ace aces act acts add ads age aged ages ago aid aide aids aim aims air airs
ale ales all also alter am and ant ante ants any ape apes apt arc arch arcs
are area arena arm arms art arts ash ask asks ate aunt awe axe bad bag bags
bake bale ball ban band bane bar bard bare barn bars base bat bate bath bats
bead beam bean bear beat bed beds bee beer bees beet beg bell belt bend bent
best bet bets bid big bin bind bins bird bit bite bits blue boa boar boat
bog bold bolt bond bone bore born boss bow bowl box boy bran brat bred brew
bud buds bug bugs bun bus bust but buy cab cabs cad cafe cage cake calm cam
came camp can cane cans cap cape caps car card care cart case cast cat cats
cave cell cent chat chin chip cite city clam clan clap claw clay clip clot
coal coat cod code coil coin cola cold cole colt comb cone cop cope cord
core corn cost cot cots cow cows crab crew crop cry cub cue cult cup cups
cur cure curl cut cuts dab dad dam dame damp dare dart dash date dead deal
dean dear debt deed deer den dens dent desk dew die died dies diet dig dim
dime din dine dint dip dire dirt dish dive dog dogs dole dome don done dot
dote dots dove down drag draw drew drip drop drum dry dual due dug dune dust
ear earn ears ease east eat eats edit eel egg ego elm end ends era eras
ire eve even ever ewe eye face fact fad fade fail fair fame fan fare farm
fast fat fate fear feat fed fee feed feel fees feet fell felt fen fern few
fig fin find fine fins fir fire firm fish fist fit five flag flat flea fled
flee flew flip flit foe fog foil fold folk fond font food fool fort foul
four fox free fret frog fun fur gag gain gal gale game gap gas gate gave
gear gel gem gems get gild gilt gin girl gist give glad glue gnat goal goat
god gold golf gone good got gown grab gray grew grid grin grip gum gun gut
guy had hail hair hale half hall halt ham hand hare harm hat hate hats haul
have hay head heal heap hear heat hen her herd here hero hid hide high hill
hilt him hint hip hire his hit hive hoe hold hole home hone hood hop hope
horn hose host hot hour how hub hue hug hum hunt hurt hut ice ices icon
idea idle inch ink inn ins into ion iota iron isle item its jab jam jar jaw
jet job jog join jot joy jug just keen keg kept key kid kin kind king kit
kite knit lab lace lad lade laid lain lair lake lamb lame lamp land lane
lap lard last late lead leaf lean leap led lend lens lent less let lest
lid lie lied lien lies lift like limb lime line lint lion lip lips list lit
live load loaf loan lob lone long lore lose lost lot lots loud love low
mad made maid mail main male malt man mane mans map mar mare mart mast mat
mate mats may meal mean meat melt men mend mesh met mice mild mile mine
mint miss mist mite moan moat mob mode mole molt mop more most moth mud
mug name nap near neat need nest net nets new news nice nine nip nod node
none nor nose not note now nut nuts oak oar oars oat oath oats odd ode
odes oil oils old one ones onto ore ores our out ours oven over owe owl
own pace pact pad page paid pail pain pair pal pale palm pan pane pans par
pare part pass past pat pate path pats pea peal pear peat pen pens pent
per pest pet pets pie pier pig pile pin pine pins pint pit pita pits plan
plea plot ply pod poem poet pole pond pony pool pop pore port pose post
pot pots pour pray prey pro pun pure put race rag raid rail rain ram ran
rang rank rant rap rare rat rate rats raw ray read real reap rear red reed
rend rent rest rib rice rid ride rife rig rim rind ring riot rip ripe rise
road roam roar rob robe rod rode role roll roof room root rope rose rot
rote row rub rug rule run rune rung runs rust rut sad safe saga sage said
sail sale salt same sand sane sang sap sat sate saw say sea seal seam sear
seat see seed seen sent set sets shed ship shoe shop shot show shut sigh
sign silt sin sine sing sip sir sire sit site six size ski skin sky slab
slat sled slid slim slip slit slot slow sly snap snip snow soap sod soil
sold sole son song sore sort soul sour sow spa span spar spat sped spin
spit spot stab star stem step stir stop sun sung sure swan tab tad tail
take tale talk tall tame tan tap tape tar tare tarn tart task tea teal
team tear teas tee ten tend tens tent term tern test than that the then
tie tied tier ties tile till tilt tin tine tins tint tip tire toad toe toil
told tole tone tons too took tool top tore torn tot tote town toy tram trap
tray tree trim trio trip true tub tube tug tuna tune turn two urn use used
van vase vast vat veil vein vest vet via vial vie view vine vise vole vote
wad wade wag wage wait wake walk wall wan wand want war ward warm warn wart
was wash wasp wave way wear web wed weed week well went wept were west wet
wide wife wig wild will win wind wine wing wins wipe wire wise wish wit
with woe wok won wood word wore work worn wove wrap yak yam yard yarn yea
year yes yet yew yolk you zeal zero zest zinc zone zoo
"""
