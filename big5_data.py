"""
Embedded Big5 (CP950) character table

Generated by tools/generate_big5_data.py from the CP950 vendor mapping.
Do not edit by hand.

Each record is 5 bytes: a 24-bit big-endian Unicode code point followed
by a 16-bit big-endian Big5 code.

Copyright (C) 2026 Garland Glessner <gglessner@gmail.com>
License: GPL-3.0 (see LICENSE)
"""

BIG5_COUNT = 13493

BIG5_DATA = (
    "ADAAoUAA/wyhQQAwAaFCADACoUMA/w6hRAAgJ6FFAP8boUYA/xqhRwD/H6FIAP8BoUkA/jChSgAg"
    "JqFLACAloUwA/lChTQD+UaFOAP5SoU8AALehUAD+VKFRAP5VoVIA/lahUwD+V6FUAP9coVUAIBOh"
    "VgD+MaFXACAUoVgA/jOhWQAldKFaAP40oVsA/k+hXAD/CKFdAP8JoV4A/jWhXwD+NqFgAP9boWEA"
    "/12hYgD+N6FjAP44oWQAMBShZQAwFaFmAP45oWcA/jqhaAAwEKFpADARoWoA/juhawD+PKFsADAK"
    "oW0AMAuhbgD+PaFvAP4+oXAAMAihcQAwCaFyAP4/oXMA/kChdAAwDKF1ADANoXYA/kGhdwD+QqF4"
    "ADAOoXkAMA+hegD+Q6F7AP5EoXwA/lmhfQD+WqF+AP5boaEA/lyhogD+XaGjAP5eoaQAIBihpQAg"
    "GaGmACAcoacAIB2hqAAwHaGpADAeoaoAIDWhqwAgMqGsAP8Doa0A/wahrgD/CqGvACA7obAAAKeh"
    "sQAwA6GyACXLobMAJc+htAAls6G1ACWyobYAJc6htwAmBqG4ACYFobkAJcehugAlxqG7ACWhobwA"
    "JaChvQAlvaG+ACW8ob8AMqOhwAAhBaHBAACvocIA/+OhwwD/P6HEAALNocUA/kmhxgD+SqHHAP5N"
    "ocgA/k6hyQD+S6HKAP5MocsA/l+hzAD+YKHNAP5hoc4A/wuhzwD/DaHQAADXodEAAPeh0gAAsaHT"
    "ACIaodQA/xyh1QD/HqHWAP8dodcAImah2AAiZ6HZACJgodoAIh6h2wAiUqHcACJhod0A/mKh3gD+"
    "Y6HfAP5koeAA/mWh4QD+ZqHiAP9eoeMAIimh5AAiKqHlACKloeYAIiCh5wAiH6HoACK/oekAM9Kh"
    "6gAz0aHrACIroewAIi6h7QAiNaHuACI0oe8AJkCh8AAmQqHxACKVofIAIpmh8wAhkaH0ACGTofUA"
    "IZCh9gAhkqH3ACGWofgAIZeh+QAhmaH6ACGYofsAIiWh/AAiI6H9AP8Pof4A/zyiQAAiFaJBAP5o"
    "okIA/wSiQwD/5aJEADASokUA/+CiRgD/4aJHAP8FokgA/yCiSQAhA6JKACEJoksA/mmiTAD+aqJN"
    "AP5rok4AM9WiTwAznKJQADOdolEAM56iUgAzzqJTADOholQAM46iVQAzj6JWADPEolcAALCiWABR"
    "WaJZAFFboloAUV6iWwBRXaJcAFFhol0AUWOiXgBV56JfAHTpomAAfM6iYQAlgaJiACWComMAJYOi"
    "ZAAlhKJlACWFomYAJYaiZwAlh6JoACWIomkAJY+iagAljqJrACWNomwAJYyibQAli6JuACWKom8A"
    "JYmicAAlPKJxACU0onIAJSyicwAlJKJ0ACUconUAJZSidgAlAKJ3ACUCongAJZWieQAlDKJ6ACUQ"
    "onsAJRSifAAlGKJ9ACVton4AJW6ioQAlcKKiACVvoqMAJVCipAAlXqKlACVqoqYAJWGipwAl4qKo"
    "ACXjoqkAJeWiqgAl5KKrACVxoqwAJXKirQAlc6KuAP8Qoq8A/xGisAD/EqKxAP8TorIA/xSiswD/"
    "FaK0AP8WorUA/xeitgD/GKK3AP8ZorgAIWCiuQAhYaK6ACFiorsAIWOivAAhZKK9ACFlor4AIWai"
    "vwAhZ6LAACFoosEAIWmiwgAwIaLDADAiosQAMCOixQAwJKLGADAloscAMCaiyAAwJ6LJADAoosoA"
    "MCmiywBTRKLNAP8hos8A/yKi0AD/I6LRAP8kotIA/yWi0wD/JqLUAP8notUA/yii1gD/KaLXAP8q"
    "otgA/yui2QD/LKLaAP8totsA/y6i3AD/L6LdAP8wot4A/zGi3wD/MqLgAP8zouEA/zSi4gD/NaLj"
    "AP82ouQA/zei5QD/OKLmAP85oucA/zqi6AD/QaLpAP9CouoA/0Oi6wD/RKLsAP9Fou0A/0ai7gD/"
    "R6LvAP9IovAA/0mi8QD/SqLyAP9LovMA/0yi9AD/TaL1AP9OovYA/0+i9wD/UKL4AP9RovkA/1Ki"
    "+gD/U6L7AP9UovwA/1Wi/QD/VqL+AP9Xo0AA/1ijQQD/WaNCAP9ao0MAA5GjRAADkqNFAAOTo0YA"
    "A5SjRwADlaNIAAOWo0kAA5ejSgADmKNLAAOZo0wAA5qjTQADm6NOAAOco08AA52jUAADnqNRAAOf"
    "o1IAA6CjUwADoaNUAAOjo1UAA6SjVgADpaNXAAOmo1gAA6ejWQADqKNaAAOpo1sAA7GjXAADsqNd"
    "AAOzo14AA7SjXwADtaNgAAO2o2EAA7ejYgADuKNjAAO5o2QAA7qjZQADu6NmAAO8o2cAA72jaAAD"
    "vqNpAAO/o2oAA8CjawADwaNsAAPDo20AA8SjbgADxaNvAAPGo3AAA8ejcQADyKNyAAPJo3MAMQWj"
    "dAAxBqN1ADEHo3YAMQijdwAxCaN4ADEKo3kAMQujegAxDKN7ADENo3wAMQ6jfQAxD6N+ADEQo6EA"
    "MRGjogAxEqOjADETo6QAMRSjpQAxFaOmADEWo6cAMRejqAAxGKOpADEZo6oAMRqjqwAxG6OsADEc"
    "o60AMR2jrgAxHqOvADEfo7AAMSCjsQAxIaOyADEio7MAMSOjtAAxJKO1ADElo7YAMSajtwAxJ6O4"
    "ADEoo7kAMSmjugAC2aO7AALJo7wAAsqjvQACx6O+AALLo78AIKyj4QBOAKRAAE5ZpEEATgGkQgBO"
    "A6RDAE5DpEQATl2kRQBOhqRGAE6MpEcATrqkSABRP6RJAFFlpEoAUWukSwBR4KRMAFIApE0AUgGk"
    "TgBSm6RPAFMVpFAAU0GkUQBTXKRSAFPIpFMATgmkVABOC6RVAE4IpFYATgqkVwBOK6RYAE44pFkA"
    "UeGkWgBORaRbAE5IpFwATl+kXQBOXqReAE6OpF8ATqGkYABRQKRhAFIDpGIAUvqkYwBTQ6RkAFPJ"
    "pGUAU+OkZgBXH6RnAFjrpGgAWRWkaQBZJ6RqAFlzpGsAW1CkbABbUaRtAFtTpG4AW/ikbwBcD6Rw"
    "AFwipHEAXDikcgBccaRzAF3dpHQAXeWkdQBd8aR2AF3ypHcAXfOkeABd/qR5AF5ypHoAXv6kewBf"
    "C6R8AF8TpH0AYk2kfgBOEaShAE4QpKIATg2kowBOLaSkAE4wpKUATjmkpgBOS6SnAFw5pKgAToik"
    "qQBOkaSqAE6VpKsATpKkrABOlKStAE6ipK4ATsGkrwBOwKSwAE7DpLEATsaksgBOx6SzAE7NpLQA"
    "TsqktQBOy6S2AE7EpLcAUUOkuABRQaS5AFFnpLoAUW2kuwBRbqS8AFFspL0AUZekvgBR9qS/AFIG"
    "pMAAUgekwQBSCKTCAFL7pMMAUv6kxABS/6TFAFMWpMYAUzmkxwBTSKTIAFNHpMkAU0WkygBTXqTL"
    "AFOEpMwAU8ukzQBTyqTOAFPNpM8AWOyk0ABZKaTRAFkrpNIAWSqk0wBZLaTUAFtUpNUAXBGk1gBc"
    "JKTXAFw6pNgAXG+k2QBd9KTaAF57pNsAXv+k3ABfFKTdAF8VpN4AX8Ok3wBiCKTgAGI2pOEAYkuk"
    "4gBiTqTjAGUvpOQAZYek5QBll6TmAGWkpOcAZbmk6ABl5aTpAGbwpOoAZwik6wBnKKTsAGsgpO0A"
    "a2Kk7gBreaTvAGvLpPAAa9Sk8QBr26TyAGwPpPMAbDSk9ABwa6T1AHIqpPYAcjak9wByO6T4AHJH"
    "pPkAclmk+gByW6T7AHKspPwAc4uk/QBOGaT+AE4WpUAAThWlQQBOFKVCAE4YpUMATjulRABOTaVF"
    "AE5PpUYATk6lRwBO5aVIAE7YpUkATtSlSgBO1aVLAE7WpUwATtelTQBO46VOAE7kpU8ATtmlUABO"
    "3qVRAFFFpVIAUUSlUwBRiaVUAFGKpVUAUaylVgBR+aVXAFH6pVgAUfilWQBSCqVaAFKgpVsAUp+l"
    "XABTBaVdAFMGpV4AUxelXwBTHaVgAE7fpWEAU0qlYgBTSaVjAFNhpWQAU2ClZQBTb6VmAFNupWcA"
    "U7ulaABT76VpAFPkpWoAU/OlawBT7KVsAFPupW0AU+mlbgBT6KVvAFP8pXAAU/ilcQBT9aVyAFPr"
    "pXMAU+aldABT6qV1AFPypXYAU/GldwBT8KV4AFPlpXkAU+2legBT+6V7AFbbpXwAVtqlfQBZFqV+"
    "AFkupaEAWTGlogBZdKWjAFl2paQAW1WlpQBbg6WmAFw8pacAXeilqABd56WpAF3mpaoAXgKlqwBe"
    "A6WsAF5zpa0AXnylrgBfAaWvAF8YpbAAXxelsQBfxaWyAGIKpbMAYlOltABiVKW1AGJSpbYAYlGl"
    "twBlpaW4AGXmpbkAZy6lugBnLKW7AGcqpbwAZyulvQBnLaW+AGtjpb8Aa82lwABsEaXBAGwQpcIA"
    "bDilwwBsQaXEAGxApcUAbD6lxgByr6XHAHOEpcgAc4mlyQB03KXKAHTmpcsAdRilzAB1H6XNAHUo"
    "pc4AdSmlzwB1MKXQAHUxpdEAdTKl0gB1M6XTAHWLpdQAdn2l1QB2rqXWAHa/pdcAdu6l2AB326XZ"
    "AHfipdoAd/Ol2wB5OqXcAHm+pd0AenSl3gB6y6XfAE4epeAATh+l4QBOUqXiAE5TpeMATmml5ABO"
    "maXlAE6kpeYATqal5wBOpaXoAE7/pekATwml6gBPGaXrAE8KpewATxWl7QBPDaXuAE8Qpe8ATxGl"
    "8ABPD6XxAE7ypfIATval8wBO+6X0AE7wpfUATvOl9gBO/aX3AE8BpfgATwul+QBRSaX6AFFHpfsA"
    "UUal/ABRSKX9AFFopf4AUXGmQABRjaZBAFGwpkIAUhemQwBSEaZEAFISpkUAUg6mRgBSFqZHAFKj"
    "pkgAUwimSQBTIaZKAFMgpksAU3CmTABTcaZNAFQJpk4AVA+mTwBUDKZQAFQKplEAVBCmUgBUAaZT"
    "AFQLplQAVASmVQBUEaZWAFQNplcAVAimWABUA6ZZAFQOploAVAamWwBUEqZcAFbgpl0AVt6mXgBW"
    "3aZfAFczpmAAVzCmYQBXKKZiAFctpmMAVyymZABXL6ZlAFcppmYAWRmmZwBZGqZoAFk3pmkAWTim"
    "agBZhKZrAFl4pmwAWYOmbQBZfaZuAFl5pm8AWYKmcABZgaZxAFtXpnIAW1imcwBbh6Z0AFuIpnUA"
    "W4WmdgBbiaZ3AFv6pngAXBameQBceaZ6AF3epnsAXgamfABedqZ9AF50pn4AXw+moQBfG6aiAF/Z"
    "pqMAX9ampABiDqalAGIMpqYAYg2mpwBiEKaoAGJjpqkAYlumqgBiWKarAGU2pqwAZemmrQBl6Kau"
    "AGXspq8AZe2msABm8qaxAGbzprIAZwmmswBnPaa0AGc0prUAZzGmtgBnNaa3AGshprgAa2SmuQBr"
    "e6a6AGwWprsAbF2mvABsV6a9AGxZpr4AbF+mvwBsYKbAAGxQpsEAbFWmwgBsYabDAGxbpsQAbE2m"
    "xQBsTqbGAHBwpscAcl+myAByXabJAHZ+psoAevmmywB8c6bMAHz4ps0AfzamzgB/iqbPAH+9ptAA"
    "gAGm0QCAA6bSAIAMptMAgBKm1ACAM6bVAIB/ptYAgImm1wCAi6bYAICMptkAgeOm2gCB6qbbAIHz"
    "ptwAgfym3QCCDKbeAIIbpt8Agh+m4ACCbqbhAIJypuIAgn6m4wCGa6bkAIhApuUAiEym5gCIY6bn"
    "AIl/pugAliGm6QBOMqbqAE6opusAT02m7ABPT6btAE9Hpu4AT1em7wBPXqbwAE80pvEAT1um8gBP"
    "VabzAE8wpvQAT1Cm9QBPUab2AE89pvcATzqm+ABPOKb5AE9DpvoAT1Sm+wBPPKb8AE9Gpv0AT2Om"
    "/gBPXKdAAE9gp0EATy+nQgBPTqdDAE82p0QAT1mnRQBPXadGAE9Ip0cAT1qnSABRTKdJAFFLp0oA"
    "UU2nSwBRdadMAFG2p00AUbenTgBSJadPAFIkp1AAUimnUQBSKqdSAFIop1MAUqunVABSqadVAFKq"
    "p1YAUqynVwBTI6dYAFNzp1kAU3WnWgBUHadbAFQtp1wAVB6nXQBUPqdeAFQmp18AVE6nYABUJ6dh"
    "AFRGp2IAVEOnYwBUM6dkAFRIp2UAVEKnZgBUG6dnAFQpp2gAVEqnaQBUOadqAFQ7p2sAVDinbABU"
    "LqdtAFQ1p24AVDanbwBUIKdwAFQ8p3EAVECncgBUMadzAFQrp3QAVB+ndQBULKd2AFbqp3cAVvCn"
    "eABW5Kd5AFbrp3oAV0qnewBXUad8AFdAp30AV02nfgBXR6ehAFdOp6IAVz6nowBXUKekAFdPp6UA"
    "VzunpgBY76enAFk+p6gAWZ2nqQBZkqeqAFmop6sAWZ6nrABZo6etAFmZp64AWZanrwBZjaewAFmk"
    "p7EAWZOnsgBZiqezAFmlp7QAW12ntQBbXKe2AFtap7cAW1unuABbjKe5AFuLp7oAW4+nuwBcLKe8"
    "AFxAp70AXEGnvgBcP6e/AFw+p8AAXJCnwQBckafCAFyUp8MAXIynxABd66fFAF4Mp8YAXo+nxwBe"
    "h6fIAF6Kp8kAXvenygBfBKfLAF8fp8wAX2SnzQBfYqfOAF93p88AX3mn0ABf2KfRAF/Mp9IAX9en"
    "0wBfzafUAF/xp9UAX+un1gBf+KfXAF/qp9gAYhKn2QBiEafaAGKEp9sAYpen3ABilqfdAGKAp94A"
    "Ynan3wBiiafgAGJtp+EAYoqn4gBifKfjAGJ+p+QAYnmn5QBic6fmAGKSp+cAYm+n6ABimKfpAGJu"
    "p+oAYpWn6wBik6fsAGKRp+0AYoan7gBlOafvAGU7p/AAZTin8QBl8afyAGb0p/MAZ1+n9ABnTqf1"
    "AGdPp/YAZ1Cn9wBnUaf4AGdcp/kAZ1an+gBnXqf7AGdJp/wAZ0an/QBnYKf+AGdTqEAAZ1eoQQBr"
    "ZahCAGvPqEMAbEKoRABsXqhFAGyZqEYAbIGoRwBsiKhIAGyJqEkAbIWoSgBsm6hLAGxqqEwAbHqo"
    "TQBskKhOAGxwqE8AbIyoUABsaKhRAGyWqFIAbJKoUwBsfahUAGyDqFUAbHKoVgBsfqhXAGx0qFgA"
    "bIaoWQBsdqhaAGyNqFsAbJSoXABsmKhdAGyCqF4AcHaoXwBwfKhgAHB9qGEAcHioYgByYqhjAHJh"
    "qGQAcmCoZQByxKhmAHLCqGcAc5aoaAB1LKhpAHUrqGoAdTeoawB1OKhsAHaCqG0Adu+obgB346hv"
    "AHnBqHAAecCocQB5v6hyAHp2qHMAfPuodAB/Vah1AICWqHYAgJOodwCAnah4AICYqHkAgJuoegCA"
    "mqh7AICyqHwAgm+ofQCCkqh+AIKLqKEAgo2oogCJi6ijAInSqKQAigCopQCMN6imAIxGqKcAjFWo"
    "qACMnaipAI1kqKoAjXCoqwCNs6isAI6rqK0AjsqorgCPm6ivAI+wqLAAj8KosQCPxqiyAI/FqLMA"
    "j8SotABd4ai1AJCRqLYAkKKotwCQqqi4AJCmqLkAkKOougCRSai7AJHGqLwAkcyovQCWMqi+AJYu"
    "qL8AljGowACWKqjBAJYsqMIATiaowwBOVqjEAE5zqMUATouoxgBOm6jHAE6eqMgATquoyQBOrKjK"
    "AE9vqMsAT52ozABPjajNAE9zqM4AT3+ozwBPbKjQAE+bqNEAT4uo0gBPhqjTAE+DqNQAT3Co1QBP"
    "dajWAE+IqNcAT2mo2ABPe6jZAE+WqNoAT36o2wBPj6jcAE+RqN0AT3qo3gBRVKjfAFFSqOAAUVWo"
    "4QBRaajiAFF3qOMAUXao5ABReKjlAFG9qOYAUf2o5wBSO6joAFI4qOkAUjeo6gBSOqjrAFIwqOwA"
    "Ui6o7QBSNqjuAFJBqO8AUr6o8ABSu6jxAFNSqPIAU1So8wBTU6j0AFNRqPUAU2ao9gBTd6j3AFN4"
    "qPgAU3mo+QBT1qj6AFPUqPsAU9eo/ABUc6j9AFR1qP4AVJapQABUeKlBAFSVqUIAVICpQwBUe6lE"
    "AFR3qUUAVISpRgBUkqlHAFSGqUgAVHypSQBUkKlKAFRxqUsAVHapTABUjKlNAFSaqU4AVGKpTwBU"
    "aKlQAFSLqVEAVH2pUgBUjqlTAFb6qVQAV4OpVQBXd6lWAFdqqVcAV2mpWABXYalZAFdmqVoAV2Sp"
    "WwBXfKlcAFkcqV0AWUmpXgBZR6lfAFlIqWAAWUSpYQBZVKliAFm+qWMAWbupZABZ1KllAFm5qWYA"
    "Wa6pZwBZ0aloAFnGqWkAWdCpagBZzalrAFnLqWwAWdOpbQBZyqluAFmvqW8AWbOpcABZ0qlxAFnF"
    "qXIAW1+pcwBbZKl0AFtjqXUAW5epdgBbmql3AFuYqXgAW5ypeQBbmal6AFubqXsAXBqpfABcSKl9"
    "AFxFqX4AXEapoQBct6miAFyhqaMAXLippABcqamlAFyrqaYAXLGppwBcs6moAF4YqakAXhqpqgBe"
    "FqmrAF4VqawAXhuprQBeEamuAF54qa8AXpqpsABel6mxAF6cqbIAXpWpswBelqm0AF72qbUAXyap"
    "tgBfJ6m3AF8pqbgAX4CpuQBfgam6AF9/qbsAX3ypvABf3am9AF/gqb4AX/2pvwBf9anAAF//qcEA"
    "YA+pwgBgFKnDAGAvqcQAYDWpxQBgFqnGAGAqqccAYBWpyABgIanJAGAnqcoAYCmpywBgK6nMAGAb"
    "qc0AYhapzgBiFanPAGI/qdAAYj6p0QBiQKnSAGJ/qdMAYsmp1ABizKnVAGLEqdYAYr+p1wBiwqnY"
    "AGK5qdkAYtKp2gBi26nbAGKrqdwAYtOp3QBi1KneAGLLqd8AYsip4ABiqKnhAGK9qeIAYryp4wBi"
    "0KnkAGLZqeUAYsep5gBizannAGK1qegAYtqp6QBisanqAGLYqesAYtap7ABi16ntAGLGqe4AYqyp"
    "7wBizqnwAGU+qfEAZaep8gBlvKnzAGX6qfQAZhSp9QBmE6n2AGYMqfcAZgap+ABmAqn5AGYOqfoA"
    "ZgCp+wBmD6n8AGYVqf0AZgqp/gBmB6pAAGcNqkEAZwuqQgBnbapDAGeLqkQAZ5WqRQBncapGAGec"
    "qkcAZ3OqSABnd6pJAGeHqkoAZ52qSwBnl6pMAGdvqk0AZ3CqTgBnf6pPAGeJqlAAZ36qUQBnkKpS"
    "AGd1qlMAZ5qqVABnk6pVAGd8qlYAZ2qqVwBncqpYAGsjqlkAa2aqWgBrZ6pbAGt/qlwAbBOqXQBs"
    "G6peAGzjql8AbOiqYABs86phAGyxqmIAbMyqYwBs5apkAGyzqmUAbL2qZgBsvqpnAGy8qmgAbOKq"
    "aQBsq6pqAGzVqmsAbNOqbABsuKptAGzEqm4AbLmqbwBswapwAGyuqnEAbNeqcgBsxapzAGzxqnQA"
    "bL+qdQBsu6p2AGzhqncAbNuqeABsyqp5AGysqnoAbO+qewBs3Kp8AGzWqn0AbOCqfgBwlaqhAHCO"
    "qqIAcJKqowBwiqqkAHCZqqUAciyqpgByLaqnAHI4qqgAckiqqQByZ6qqAHJpqqsAcsCqrAByzqqt"
    "AHLZqq4ActeqrwBy0KqwAHOpqrEAc6iqsgBzn6qzAHOrqrQAc6WqtQB1Paq2AHWdqrcAdZmquAB1"
    "mqq5AHaEqroAdsKquwB28qq8AHb0qr0Ad+WqvgB3/aq/AHk+qsAAeUCqwQB5QarCAHnJqsMAeciq"
    "xAB6eqrFAHp5qsYAevqqxwB8/qrIAH9UqskAf4yqygB/i6rLAIAFqswAgLqqzQCAparOAICiqs8A"
    "gLGq0ACAoarRAICrqtIAgKmq0wCAtKrUAICqqtUAgK+q1gCB5arXAIH+qtgAgg2q2QCCs6raAIKd"
    "qtsAgpmq3ACCrardAIK9qt4Agp+q3wCCuargAIKxquEAgqyq4gCCparjAIKvquQAgriq5QCCo6rm"
    "AIKwqucAgr6q6ACCt6rpAIZOquoAhnGq6wBSHarsAIhoqu0Ajsuq7gCPzqrvAI/UqvAAj9Gq8QCQ"
    "taryAJC4qvMAkLGq9ACQtqr1AJHHqvYAkdGq9wCVd6r4AJWAqvkAlhyq+gCWQKr7AJY/qvwAljuq"
    "/QCWRKr+AJZCq0AAlrmrQQCW6KtCAJdSq0MAl16rRABOn6tFAE6tq0YATq6rRwBP4atIAE+1q0kA"
    "T6+rSgBPv6tLAE/gq0wAT9GrTQBPz6tOAE/dq08AT8OrUABPtqtRAE/Yq1IAT9+rUwBPyqtUAE/X"
    "q1UAT66rVgBP0KtXAE/Eq1gAT8KrWQBP2qtaAE/Oq1sAT96rXABPt6tdAFFXq14AUZKrXwBRkatg"
    "AFGgq2EAUk6rYgBSQ6tjAFJKq2QAUk2rZQBSTKtmAFJLq2cAUkeraABSx6tpAFLJq2oAUsOrawBS"
    "watsAFMNq20AU1erbgBTe6tvAFOaq3AAU9urcQBUrKtyAFTAq3MAVKirdABUzqt1AFTJq3YAVLir"
    "dwBUpqt4AFSzq3kAVMeregBUwqt7AFS9q3wAVKqrfQBUwat+AFTEq6EAVMirogBUr6ujAFSrq6QA"
    "VLGrpQBUu6umAFSpq6cAVKerqABUv6upAFb/q6oAV4KrqwBXi6usAFegq60AV6OrrgBXoquvAFfO"
    "q7AAV66rsQBXk6uyAFlVq7MAWVGrtABZT6u1AFlOq7YAWVCrtwBZ3Ku4AFnYq7kAWf+rugBZ46u7"
    "AFnoq7wAWgOrvQBZ5au+AFnqq78AWdqrwABZ5qvBAFoBq8IAWfurwwBbaavEAFujq8UAW6arxgBb"
    "pKvHAFuiq8gAW6WryQBcAavKAFxOq8sAXE+rzABcTavNAFxLq84AXNmrzwBc0qvQAF33q9EAXh2r"
    "0gBeJavTAF4fq9QAXn2r1QBeoKvWAF6mq9cAXvqr2ABfCKvZAF8tq9oAX2Wr2wBfiKvcAF+Fq90A"
    "X4qr3gBfi6vfAF+Hq+AAX4yr4QBfiaviAGASq+MAYB2r5ABgIKvlAGAlq+YAYA6r5wBgKKvoAGBN"
    "q+kAYHCr6gBgaKvrAGBiq+wAYEar7QBgQ6vuAGBsq+8AYGur8ABgaqvxAGBkq/IAYkGr8wBi3Kv0"
    "AGMWq/UAYwmr9gBi/Kv3AGLtq/gAYwGr+QBi7qv6AGL9q/sAYwer/ABi8av9AGL3q/4AYu+sQABi"
    "7KxBAGL+rEIAYvSsQwBjEaxEAGMCrEUAZT+sRgBlRaxHAGWrrEgAZb2sSQBl4qxKAGYlrEsAZi2s"
    "TABmIKxNAGYnrE4AZi+sTwBmH6xQAGYorFEAZjGsUgBmJKxTAGb3rFQAZ/+sVQBn06xWAGfxrFcA"
    "Z9SsWABn0KxZAGfsrFoAZ7asWwBnr6xcAGf1rF0AZ+msXgBn76xfAGfErGAAZ9GsYQBntKxiAGfa"
    "rGMAZ+WsZABnuKxlAGfPrGYAZ96sZwBn86xoAGewrGkAZ9msagBn4qxrAGfdrGwAZ9KsbQBraqxu"
    "AGuDrG8Aa4ascABrtaxxAGvSrHIAa9escwBsH6x0AGzJrHUAbQusdgBtMqx3AG0qrHgAbUGseQBt"
    "Jax6AG0MrHsAbTGsfABtHqx9AG0XrH4AbTusoQBtPayiAG0+rKMAbTaspABtG6ylAGz1rKYAbTms"
    "pwBtJ6yoAG04rKkAbSmsqgBtLqyrAG01rKwAbQ6srQBtK6yuAHCrrK8AcLqssABws6yxAHCsrLIA"
    "cK+sswBwray0AHC4rLUAcK6stgBwpKy3AHIwrLgAcnKsuQByb6y6AHJ0rLsAcumsvABy4Ky9AHLh"
    "rL4Ac7esvwBzyqzAAHO7rMEAc7KswgBzzazDAHPArMQAc7OsxQB1GqzGAHUtrMcAdU+syAB1TKzJ"
    "AHVOrMoAdUusywB1q6zMAHWkrM0AdaWszgB1oqzPAHWjrNAAdnis0QB2hqzSAHaHrNMAdois1AB2"
    "yKzVAHbGrNYAdsOs1wB2xazYAHcBrNkAdvms2gB2+KzbAHcJrNwAdwus3QB2/qzeAHb8rN8Adwes"
    "4AB33KzhAHgCrOIAeBSs4wB4DKzkAHgNrOUAeUas5gB5SaznAHlIrOgAeUes6QB5uazqAHm6rOsA"
    "edGs7AB50qztAHnLrO4Aen+s7wB6gazwAHr/rPEAev2s8gB8fazzAH0CrPQAfQWs9QB9AKz2AH0J"
    "rPcAfQes+AB9BKz5AH0GrPoAfzis+wB/jqz8AH+/rP0AgASs/gCAEK1AAIANrUEAgBGtQgCANq1D"
    "AIDWrUQAgOWtRQCA2q1GAIDDrUcAgMStSACAzK1JAIDhrUoAgNutSwCAzq1MAIDerU0AgOStTgCA"
    "3a1PAIH0rVAAgiKtUQCC561SAIMDrVMAgwWtVACC461VAILbrVYAguatVwCDBK1YAILlrVkAgwKt"
    "WgCDCa1bAILSrVwAgtetXQCC8a1eAIMBrV8AgtytYACC1K1hAILRrWIAgt6tYwCC061kAILfrWUA"
    "gu+tZgCDBq1nAIZQrWgAhnmtaQCGe61qAIZ6rWsAiE2tbACIa61tAImBrW4AidStbwCKCK1wAIoC"
    "rXEAigOtcgCMnq1zAIygrXQAjXStdQCNc612AI20rXcAjs2teACOzK15AI/wrXoAj+atewCP4q18"
    "AI/qrX0Aj+WtfgCP7a2hAI/rraIAj+StowCP6K2kAJDKraUAkM6tpgCQwa2nAJDDragAkUutqQCR"
    "Sq2qAJHNrasAlYKtrACWUK2tAJZLra4AlkytrwCWTa2wAJdirbEAl2mtsgCXy62zAJftrbQAl/Ot"
    "tQCYAa22AJiorbcAmNutuACY3625AJmWrboAmZmtuwBOWK28AE6zrb0AUAytvgBQDa2/AFAjrcAA"
    "T++twQBQJq3CAFAlrcMAT/itxABQKa3FAFAWrcYAUAatxwBQPK3IAFAfrckAUBqtygBQEq3LAFAR"
    "rcwAT/qtzQBQAK3OAFAUrc8AUCit0ABP8a3RAFAhrdIAUAut0wBQGa3UAFAYrdUAT/Ot1gBP7q3X"
    "AFAtrdgAUCqt2QBP/q3aAFArrdsAUAmt3ABRfK3dAFGkrd4AUaWt3wBRoq3gAFHNreEAUcyt4gBR"
    "xq3jAFHLreQAUlat5QBSXK3mAFJUrecAUlut6ABSXa3pAFMqreoAU3+t6wBTn63sAFOdre0AU9+t"
    "7gBU6K3vAFUQrfAAVQGt8QBVN63yAFT8rfMAVOWt9ABU8q31AFUGrfYAVPqt9wBVFK34AFTprfkA"
    "VO2t+gBU4a37AFUJrfwAVO6t/QBU6q3+AFTmrkAAVSeuQQBVB65CAFT9rkMAVQ+uRABXA65FAFcE"
    "rkYAV8KuRwBX1K5IAFfLrkkAV8OuSgBYCa5LAFkPrkwAWVeuTQBZWK5OAFlark8AWhGuUABaGK5R"
    "AFocrlIAWh+uUwBaG65UAFoTrlUAWeyuVgBaIK5XAFojrlgAWimuWQBaJa5aAFoMrlsAWgmuXABb"
    "a65dAFxYrl4AW7CuXwBbs65gAFu2rmEAW7SuYgBbrq5jAFu1rmQAW7muZQBbuK5mAFwErmcAXFGu"
    "aABcVa5pAFxQrmoAXO2uawBc/a5sAFz7rm0AXOqubgBc6K5vAFzwrnAAXPaucQBdAa5yAFz0rnMA"
    "Xe6udABeLa51AF4rrnYAXquudwBera54AF6nrnkAXzGuegBfkq57AF+RrnwAX5CufQBgWa5+AGBj"
    "rqEAYGWuogBgUK6jAGBVrqQAYG2upQBgaa6mAGBvrqcAYISuqABgn66pAGCarqoAYI2uqwBglK6s"
    "AGCMrq0AYIWurgBglq6vAGJHrrAAYvOusQBjCK6yAGL/rrMAY06utABjPq61AGMvrrYAY1WutwBj"
    "Qq64AGNGrrkAY0+uugBjSa67AGM6rrwAY1CuvQBjPa6+AGMqrr8AYyuuwABjKK7BAGNNrsIAY0yu"
    "wwBlSK7EAGVJrsUAZZmuxgBlwa7HAGXFrsgAZkKuyQBmSa7KAGZPrssAZkOuzABmUq7NAGZMrs4A"
    "ZkWuzwBmQa7QAGb4rtEAZxSu0gBnFa7TAGcXrtQAaCGu1QBoOK7WAGhIrtcAaEau2ABoU67ZAGg5"
    "rtoAaEKu2wBoVK7cAGgprt0AaLOu3gBoF67fAGhMruAAaFGu4QBoPa7iAGf0ruMAaFCu5ABoQK7l"
    "AGg8ruYAaEOu5wBoKq7oAGhFrukAaBOu6gBoGK7rAGhBruwAa4qu7QBria7uAGu3ru8AbCOu8ABs"
    "J67xAGworvIAbCau8wBsJK70AGzwrvUAbWqu9gBtla73AG2IrvgAbYeu+QBtZq76AG14rvsAbXeu"
    "/ABtWa79AG2Trv4AbWyvQABtia9BAG1ur0IAbVqvQwBtdK9EAG1pr0UAbYyvRgBtiq9HAG15r0gA"
    "bYWvSQBtZa9KAG2Ur0sAcMqvTABw2K9NAHDkr04AcNmvTwBwyK9QAHDPr1EAcjmvUgByea9TAHL8"
    "r1QAcvmvVQBy/a9WAHL4r1cAcvevWABzhq9ZAHPtr1oAdAmvWwBz7q9cAHPgr10Ac+qvXgBz3q9f"
    "AHVUr2AAdV2vYQB1XK9iAHVar2MAdVmvZAB1vq9lAHXFr2YAdcevZwB1sq9oAHWzr2kAdb2vagB1"
    "vK9rAHW5r2wAdcKvbQB1uK9uAHaLr28AdrCvcAB2yq9xAHbNr3IAds6vcwB3Ka90AHcfr3UAdyCv"
    "dgB3KK93AHfpr3gAeDCveQB4J696AHg4r3sAeB2vfAB4NK99AHg3r34AeCWvoQB4La+iAHggr6MA"
    "eB+vpAB4Mq+lAHlVr6YAeVCvpwB5YK+oAHlfr6kAeVavqgB5Xq+rAHldr6wAeVevrQB5Wq+uAHnk"
    "r68AeeOvsAB556+xAHnfr7IAeeavswB56a+0AHnYr7UAeoSvtgB6iK+3AHrZr7gAewavuQB7Ea+6"
    "AHyJr7sAfSGvvAB9F6+9AH0Lr74AfQqvvwB9IK/AAH0ir8EAfRSvwgB9EK/DAH0Vr8QAfRqvxQB9"
    "HK/GAH0Nr8cAfRmvyAB9G6/JAH86r8oAf1+vywB/lK/MAH/Fr80Af8GvzgCABq/PAIAYr9AAgBWv"
    "0QCAGa/SAIAXr9MAgD2v1ACAP6/VAIDxr9YAgQKv1wCA8K/YAIEFr9kAgO2v2gCA9K/bAIEGr9wA"
    "gPiv3QCA86/eAIEIr98AgP2v4ACBCq/hAID8r+IAgO+v4wCB7a/kAIHsr+UAggCv5gCCEK/nAIIq"
    "r+gAgiuv6QCCKK/qAIIsr+sAgruv7ACDK6/tAINSr+4Ag1Sv7wCDSq/wAIM4r/EAg1Cv8gCDSa/z"
    "AIM1r/QAgzSv9QCDT6/2AIMyr/cAgzmv+ACDNq/5AIMXr/oAg0Cv+wCDMa/8AIMor/0Ag0Ov/gCG"
    "VLBAAIaKsEEAhqqwQgCGk7BDAIaksEQAhqmwRQCGjLBGAIajsEcAhpywSACIcLBJAIh3sEoAiIGw"
    "SwCIgrBMAIh9sE0AiHmwTgCKGLBPAIoQsFAAig6wUQCKDLBSAIoVsFMAigqwVACKF7BVAIoTsFYA"
    "ihawVwCKD7BYAIoRsFkAjEiwWgCMerBbAIx5sFwAjKGwXQCMorBeAI13sF8AjqywYACO0rBhAI7U"
    "sGIAjs+wYwCPsbBkAJABsGUAkAawZgCP97BnAJAAsGgAj/qwaQCP9LBqAJADsGsAj/2wbACQBbBt"
    "AI/4sG4AkJWwbwCQ4bBwAJDdsHEAkOKwcgCRUrBzAJFNsHQAkUywdQCR2LB2AJHdsHcAkdeweACR"
    "3LB5AJHZsHoAlYOwewCWYrB8AJZjsH0AlmGwfgCWW7ChAJZdsKIAlmSwowCWWLCkAJZesKUAlruw"
    "pgCY4rCnAJmssKgAmqiwqQCa2LCqAJslsKsAmzKwrACbPLCtAE5+sK4AUHqwrwBQfbCwAFBcsLEA"
    "UEewsgBQQ7CzAFBMsLQAUFqwtQBQSbC2AFBlsLcAUHawuABQTrC5AFBVsLoAUHWwuwBQdLC8AFB3"
    "sL0AUE+wvgBQD7C/AFBvsMAAUG2wwQBRXLDCAFGVsMMAUfCwxABSarDFAFJvsMYAUtKwxwBS2bDI"
    "AFLYsMkAUtWwygBTELDLAFMPsMwAUxmwzQBTP7DOAFNAsM8AUz6w0ABTw7DRAGb8sNIAVUaw0wBV"
    "arDUAFVmsNUAVUSw1gBVXrDXAFVhsNgAVUOw2QBVSrDaAFUxsNsAVVaw3ABVT7DdAFVVsN4AVS+w"
    "3wBVZLDgAFU4sOEAVS6w4gBVXLDjAFUssOQAVWOw5QBVM7DmAFVBsOcAVVew6ABXCLDpAFcLsOoA"
    "Vwmw6wBX37DsAFgFsO0AWAqw7gBYBrDvAFfgsPAAV+Sw8QBX+rDyAFgCsPMAWDWw9ABX97D1AFf5"
    "sPYAWSCw9wBZYrD4AFo2sPkAWkGw+gBaSbD7AFpmsPwAWmqw/QBaQLD+AFo8sUAAWmKxQQBaWrFC"
    "AFpGsUMAWkqxRABbcLFFAFvHsUYAW8WxRwBbxLFIAFvCsUkAW7+xSgBbxrFLAFwJsUwAXAixTQBc"
    "B7FOAFxgsU8AXFyxUABcXbFRAF0HsVIAXQaxUwBdDrFUAF0bsVUAXRaxVgBdIrFXAF0RsVgAXSmx"
    "WQBdFLFaAF0ZsVsAXSSxXABdJ7FdAF0XsV4AXeKxXwBeOLFgAF42sWEAXjOxYgBeN7FjAF63sWQA"
    "XrixZQBetrFmAF61sWcAXr6xaABfNbFpAF83sWoAX1exawBfbLFsAF9psW0AX2uxbgBfl7FvAF+Z"
    "sXAAX56xcQBfmLFyAF+hsXMAX6CxdABfnLF1AGB/sXYAYKOxdwBgibF4AGCgsXkAYKixegBgy7F7"
    "AGC0sXwAYOaxfQBgvbF+AGDFsaEAYLuxogBgtbGjAGDcsaQAYLyxpQBg2LGmAGDVsacAYMaxqABg"
    "37GpAGC4saoAYNqxqwBgx7GsAGIasa0AYhuxrgBiSLGvAGOgsbAAY6exsQBjcrGyAGOWsbMAY6Kx"
    "tABjpbG1AGN3sbYAY2extwBjmLG4AGOqsbkAY3GxugBjqbG7AGOJsbwAY4OxvQBjm7G+AGNrsb8A"
    "Y6ixwABjhLHBAGOIscIAY5mxwwBjobHEAGOsscUAY5KxxgBjj7HHAGOAscgAY3uxyQBjabHKAGNo"
    "scsAY3qxzABlXbHNAGVWsc4AZVGxzwBlWbHQAGVXsdEAVV+x0gBlT7HTAGVYsdQAZVWx1QBlVLHW"
    "AGWcsdcAZZux2ABlrLHZAGXPsdoAZcux2wBlzLHcAGXOsd0AZl2x3gBmWrHfAGZkseAAZmix4QBm"
    "ZrHiAGZeseMAZvmx5ABS17HlAGcbseYAaIGx5wBor7HoAGiisekAaJOx6gBotbHrAGh/sewAaHax"
    "7QBosbHuAGinse8AaJex8ABosLHxAGiDsfIAaMSx8wBorbH0AGiGsfUAaIWx9gBolLH3AGidsfgA"
    "aKix+QBon7H6AGihsfsAaIKx/ABrMrH9AGu6sf4Aa+uyQABr7LJBAGwrskIAbY6yQwBtvLJEAG3z"
    "skUAbdmyRgBtsrJHAG3hskgAbcyySQBt5LJKAG37sksAbfqyTABuBbJNAG3Hsk4AbcuyTwBtr7JQ"
    "AG3RslEAba6yUgBt3rJTAG35slQAbbiyVQBt97JWAG31slcAbcWyWABt0rJZAG4asloAbbWyWwBt"
    "2rJcAG3rsl0AbdiyXgBt6rJfAG3xsmAAbe6yYQBt6LJiAG3GsmMAbcSyZABtqrJlAG3ssmYAbb+y"
    "ZwBt5rJoAHD5smkAcQmyagBxCrJrAHD9smwAcO+ybQByPbJuAHJ9sm8AcoGycABzHLJxAHMbsnIA"
    "cxaycwBzE7J0AHMZsnUAc4eydgB0BbJ3AHQKsngAdAOyeQB0BrJ6AHP+snsAdA2yfAB04LJ9AHT2"
    "sn4AdPeyoQB1HLKiAHUisqMAdWWypAB1ZrKlAHVisqYAdXCypwB1j7KoAHXUsqkAddWyqgB1tbKr"
    "AHXKsqwAdc2yrQB2jrKuAHbUsq8AdtKysAB227KxAHc3srIAdz6yswB3PLK0AHc2srUAdziytgB3"
    "OrK3AHhrsrgAeEOyuQB4TrK6AHllsrsAeWiyvAB5bbK9AHn7sr4AepKyvwB6lbLAAHsgssEAeyiy"
    "wgB7G7LDAHssssQAeyayxQB7GbLGAHsesscAey6yyAB8krLJAHyXssoAfJWyywB9RrLMAH1Dss0A"
    "fXGyzgB9LrLPAH05stAAfTyy0QB9QLLSAH0wstMAfTOy1AB9RLLVAH0vstYAfUKy1wB9MrLYAH0x"
    "stkAfz2y2gB/nrLbAH+astwAf8yy3QB/zrLeAH/Sst8AgByy4ACASrLhAIBGsuIAgS+y4wCBFrLk"
    "AIEjsuUAgSuy5gCBKbLnAIEwsugAgSSy6QCCArLqAII1susAgjey7ACCNrLtAII5su4Ag46y7wCD"
    "nrLwAIOYsvEAg3iy8gCDorLzAIOWsvQAg72y9QCDq7L2AIOSsvcAg4qy+ACDk7L5AIOJsvoAg6Cy"
    "+wCDd7L8AIN7sv0Ag3yy/gCDhrNAAIOns0EAhlWzQgBfarNDAIbHs0QAhsCzRQCGtrNGAIbEs0cA"
    "hrWzSACGxrNJAIbLs0oAhrGzSwCGr7NMAIbJs00AiFOzTgCInrNPAIiIs1AAiKuzUQCIkrNSAIiW"
    "s1MAiI2zVACIi7NVAImTs1YAiY+zVwCKKrNYAIods1kAiiOzWgCKJbNbAIoxs1wAii2zXQCKH7Ne"
    "AIobs18AiiKzYACMSbNhAIxas2IAjKmzYwCMrLNkAIyrs2UAjKizZgCMqrNnAIyns2gAjWezaQCN"
    "ZrNqAI2+s2sAjbqzbACO27NtAI7fs24AkBmzbwCQDbNwAJAas3EAkBezcgCQI7NzAJAfs3QAkB2z"
    "dQCQELN2AJAVs3cAkB6zeACQILN5AJAPs3oAkCKzewCQFrN8AJAbs30AkBSzfgCQ6LOhAJDts6IA"
    "kP2zowCRV7OkAJHOs6UAkfWzpgCR5rOnAJHjs6gAkeezqQCR7bOqAJHps6sAlYmzrACWarOtAJZ1"
    "s64AlnOzrwCWeLOwAJZws7EAlnSzsgCWdrOzAJZ3s7QAlmyztQCWwLO2AJbqs7cAlumzuAB64LO5"
    "AHrfs7oAmAKzuwCYA7O8AJtas70AnOWzvgCedbO/AJ5/s8AAnqWzwQCeu7PCAFCis8MAUI2zxABQ"
    "hbPFAFCZs8YAUJGzxwBQgLPIAFCWs8kAUJizygBQmrPLAGcAs8wAUfGzzQBScrPOAFJ0s88AUnWz"
    "0ABSabPRAFLes9IAUt2z0wBS27PUAFNas9UAU6Wz1gBVe7PXAFWAs9gAVaez2QBVfLPaAFWKs9sA"
    "VZ2z3ABVmLPdAFWCs94AVZyz3wBVqrPgAFWUs+EAVYez4gBVi7PjAFWDs+QAVbOz5QBVrrPmAFWf"
    "s+cAVT6z6ABVsrPpAFWas+oAVbuz6wBVrLPsAFWxs+0AVX6z7gBVibPvAFWrs/AAVZmz8QBXDbPy"
    "AFgvs/MAWCqz9ABYNLP1AFgks/YAWDCz9wBYMbP4AFghs/kAWB2z+gBYILP7AFj5s/wAWPqz/QBZ"
    "YLP+AFp3tEAAWpq0QQBaf7RCAFqStEMAWpu0RABap7RFAFtztEYAW3G0RwBb0rRIAFvMtEkAW9O0"
    "SgBb0LRLAFwKtEwAXAu0TQBcMbROAF1MtE8AXVC0UABdNLRRAF1HtFIAXf20UwBeRbRUAF49tFUA"
    "XkC0VgBeQ7RXAF5+tFgAXsq0WQBewbRaAF7CtFsAXsS0XABfPLRdAF9ttF4AX6m0XwBfqrRgAF+o"
    "tGEAYNG0YgBg4bRjAGCytGQAYLa0ZQBg4LRmAGEctGcAYSO0aABg+rRpAGEVtGoAYPC0awBg+7Rs"
    "AGD0tG0AYWi0bgBg8bRvAGEOtHAAYPa0cQBhCbRyAGEAtHMAYRK0dABiH7R1AGJJtHYAY6O0dwBj"
    "jLR4AGPPtHkAY8C0egBj6bR7AGPJtHwAY8a0fQBjzbR+AGPStKEAY+O0ogBj0LSjAGPhtKQAY9a0"
    "pQBj7bSmAGPutKcAY3a0qABj9LSpAGPqtKoAY9u0qwBkUrSsAGPatK0AY/m0rgBlXrSvAGVmtLAA"
    "ZWK0sQBlY7SyAGWRtLMAZZC0tABlr7S1AGZutLYAZnC0twBmdLS4AGZ2tLkAZm+0ugBmkbS7AGZ6"
    "tLwAZn60vQBmd7S+AGb+tL8AZv+0wABnH7TBAGcdtMIAaPq0wwBo1bTEAGjgtMUAaNi0xgBo17TH"
    "AGkFtMgAaN+0yQBo9bTKAGjutMsAaOe0zABo+bTNAGjStM4AaPK0zwBo47TQAGjLtNEAaM200gBp"
    "DbTTAGkStNQAaQ601QBoybTWAGjatNcAaW602ABo+7TZAGs+tNoAazq02wBrPbTcAGuYtN0Aa5a0"
    "3gBrvLTfAGvvtOAAbC604QBsL7TiAGwstOMAbi+05ABuOLTlAG5UtOYAbiG05wBuMrToAG5ntOkA"
    "bkq06gBuILTrAG4ltOwAbiO07QBuG7TuAG5btO8Abli08ABuJLTxAG5WtPIAbm608wBuLbT0AG4m"
    "tPUAbm+09gBuNLT3AG5NtPgAbjq0+QBuLLT6AG5DtPsAbh20/ABuPrT9AG7LtP4Abom1QABuGbVB"
    "AG5OtUIAbmO1QwBuRLVEAG5ytUUAbmm1RgBuX7VHAHEZtUgAcRq1SQBxJrVKAHEwtUsAcSG1TABx"
    "NrVNAHFutU4AcRy1TwByTLVQAHKEtVEAcoC1UgBzNrVTAHMltVQAczS1VQBzKbVWAHQ6tVcAdCq1"
    "WAB0M7VZAHQitVoAdCW1WwB0NbVcAHQ2tV0AdDS1XgB0L7VfAHQbtWAAdCa1YQB0KLViAHUltWMA"
    "dSa1ZAB1a7VlAHVqtWYAdeK1ZwB127VoAHXjtWkAddm1agB12LVrAHXetWwAdeC1bQB2e7VuAHZ8"
    "tW8Adpa1cAB2k7VxAHa0tXIAdty1cwB3T7V0AHfttXUAeF21dgB4bLV3AHhvtXgAeg21eQB6CLV6"
    "AHoLtXsAegW1fAB6ALV9AHqYtX4Aepe1oQB6lrWiAHrltaMAeuO1pAB7SbWlAHtWtaYAe0a1pwB7"
    "ULWoAHtStakAe1S1qgB7TbWrAHtLtawAe0+1rQB7UbWuAHyfta8AfKW1sAB9XrWxAH1QtbIAfWi1"
    "swB9VbW0AH0rtbUAfW61tgB9crW3AH1htbgAfWa1uQB9YrW6AH1wtbsAfXO1vABVhLW9AH/Utb4A"
    "f9W1vwCAC7XAAIBStcEAgIW1wgCBVbXDAIFUtcQAgUu1xQCBUbXGAIFOtccAgTm1yACBRrXJAIE+"
    "tcoAgUy1ywCBU7XMAIF0tc0AghK1zgCCHLXPAIPptdAAhAO10QCD+LXSAIQNtdMAg+C11ACDxbXV"
    "AIQLtdYAg8G11wCD77XYAIPxtdkAg/S12gCEV7XbAIQKtdwAg/C13QCEDLXeAIPMtd8Ag/214ACD"
    "8rXhAIPKteIAhDi14wCEDrXkAIQEteUAg9y15gCEB7XnAIPUtegAg9+16QCGW7XqAIbftesAhtm1"
    "7ACG7bXtAIbUte4Ahtu17wCG5LXwAIbQtfEAht618gCIV7XzAIjBtfQAiMK19QCIsbX2AImDtfcA"
    "iZa1+ACKO7X5AIpgtfoAilW1+wCKXrX8AIo8tf0AikG1/gCKVLZAAIpbtkEAilC2QgCKRrZDAIo0"
    "tkQAijq2RQCKNrZGAIpWtkcAjGG2SACMgrZJAIyvtkoAjLy2SwCMs7ZMAIy9tk0AjMG2TgCMu7ZP"
    "AIzAtlAAjLS2UQCMt7ZSAIy2tlMAjL+2VACMuLZVAI2KtlYAjYW2VwCNgbZYAI3OtlkAjd22WgCN"
    "y7ZbAI3atlwAjdG2XQCNzLZeAI3btl8Ajca2YACO+7ZhAI74tmIAjvy2YwCPnLZkAJAutmUAkDW2"
    "ZgCQMbZnAJA4tmgAkDK2aQCQNrZqAJECtmsAkPW2bACRCbZtAJD+tm4AkWO2bwCRZbZwAJHPtnEA"
    "khS2cgCSFbZzAJIjtnQAkgm2dQCSHrZ2AJINtncAkhC2eACSB7Z5AJIRtnoAlZS2ewCVj7Z8AJWL"
    "tn0AlZG2fgCVk7ahAJWStqIAlY62owCWirakAJaOtqUAlou2pgCWfbanAJaFtqgAloa2qQCWjbaq"
    "AJZytqsAloS2rACWwbatAJbFtq4AlsS2rwCWxrawAJbHtrEAlu+2sgCW8razAJfMtrQAmAW2tQCY"
    "Bra2AJgItrcAmOe2uACY6ra5AJjvtroAmOm2uwCY8ra8AJjttr0Ama62vgCZrba/AJ7DtsAAns22"
    "wQCe0bbCAE6CtsMAUK22xABQtbbFAFCytsYAULO2xwBQxbbIAFC+tskAUKy2ygBQt7bLAFC7tswA"
    "UK+2zQBQx7bOAFJ/ts8AUne20ABSfbbRAFLfttIAUua20wBS5LbUAFLittUAUuO21gBTL7bXAFXf"
    "ttgAVei22QBV07baAFXmttsAVc623ABV3LbdAFXHtt4AVdG23wBV47bgAFXktuEAVe+24gBV2rbj"
    "AFXhtuQAVcW25QBVxrbmAFXltucAVcm26ABXErbpAFcTtuoAWF626wBYUbbsAFhYtu0AWFe27gBY"
    "WrbvAFhUtvAAWGu28QBYTLbyAFhttvMAWEq29ABYYrb1AFhStvYAWEu29wBZZ7b4AFrBtvkAWsm2"
    "+gBazLb7AFq+tvwAWr22/QBavLb+AFqzt0AAWsK3QQBasrdCAF1pt0MAXW+3RABeTLdFAF55t0YA"
    "Xsm3RwBeyLdIAF8St0kAX1m3SgBfrLdLAF+ut0wAYRq3TQBhD7dOAGFIt08AYR+3UABg87dRAGEb"
    "t1IAYPm3UwBhAbdUAGEIt1UAYU63VgBhTLdXAGFEt1gAYU23WQBhPrdaAGE0t1sAYSe3XABhDbdd"
    "AGEGt14AYTe3XwBiIbdgAGIit2EAZBO3YgBkPrdjAGQet2QAZCq3ZQBkLbdmAGQ9t2cAZCy3aABk"
    "D7dpAGQct2oAZBS3awBkDbdsAGQ2t20AZBa3bgBkF7dvAGQGt3AAZWy3cQBln7dyAGWwt3MAZpe3"
    "dABmibd1AGaHt3YAZoi3dwBmlrd4AGaEt3kAZpi3egBmjbd7AGcDt3wAaZS3fQBpbbd+AGlat6EA"
    "aXe3ogBpYLejAGlUt6QAaXW3pQBpMLemAGmCt6cAaUq3qABpaLepAGlrt6oAaV63qwBpU7esAGl5"
    "t60AaYa3rgBpXbevAGljt7AAaVu3sQBrR7eyAGtyt7MAa8C3tABrv7e1AGvTt7YAa/23twBuore4"
    "AG6vt7kAbtO3ugButre7AG7Ct7wAbpC3vQBunbe+AG7Ht78AbsW3wABupbfBAG6Yt8IAbry3wwBu"
    "urfEAG6rt8UAbtG3xgBulrfHAG6ct8gAbsS3yQBu1LfKAG6qt8sAbqe3zAButLfNAHFOt84AcVm3"
    "zwBxabfQAHFkt9EAcUm30gBxZ7fTAHFct9QAcWy31QBxZrfWAHFMt9cAcWW32ABxXrfZAHFGt9oA"
    "cWi32wBxVrfcAHI6t90AclK33gBzN7ffAHNFt+AAcz+34QBzPrfiAHRvt+MAdFq35AB0VbflAHRf"
    "t+YAdF635wB0QbfoAHQ/t+kAdFm36gB0W7frAHRct+wAdXa37QB1eLfuAHYAt+8AdfC38AB2Abfx"
    "AHXyt/IAdfG38wB1+rf0AHX/t/UAdfS39gB187f3AHbet/gAdt+3+QB3W7f6AHdrt/sAd2a3/AB3"
    "Xrf9AHdjt/4Ad3m4QAB3arhBAHdsuEIAd1y4QwB3ZbhEAHdouEUAd2K4RgB37rhHAHiOuEgAeLC4"
    "SQB4l7hKAHiYuEsAeIy4TAB4ibhNAHh8uE4AeJG4TwB4k7hQAHh/uFEAeXq4UgB5f7hTAHmBuFQA"
    "hCy4VQB5vbhWAHocuFcAehq4WAB6ILhZAHoUuFoAeh+4WwB6HrhcAHqfuF0AeqC4XgB7d7hfAHvA"
    "uGAAe2C4YQB7brhiAHtnuGMAfLG4ZAB8s7hlAHy1uGYAfZO4ZwB9ebhoAH2RuGkAfYG4agB9j7hr"
    "AH1buGwAf264bQB/abhuAH9quG8Af3K4cAB/qbhxAH+ouHIAf6S4cwCAVrh0AIBYuHUAgIa4dgCA"
    "hLh3AIFxuHgAgXC4eQCBeLh6AIFluHsAgW64fACBc7h9AIFruH4AgXm4oQCBeriiAIFmuKMAggW4"
    "pACCR7ilAISCuKYAhHe4pwCEPbioAIQxuKkAhHW4qgCEZrirAIRruKwAhEm4rQCEbLiuAIRbuK8A"
    "hDy4sACENbixAIRhuLIAhGO4swCEabi0AIRtuLUAhEa4tgCGXri3AIZcuLgAhl+4uQCG+bi6AIcT"
    "uLsAhwi4vACHB7i9AIcAuL4Ahv64vwCG+7jAAIcCuMEAhwO4wgCHBrjDAIcKuMQAiFm4xQCI37jG"
    "AIjUuMcAiNm4yACI3LjJAIjYuMoAiN24ywCI4bjMAIjKuM0AiNW4zgCI0rjPAImcuNAAieO40QCK"
    "a7jSAIpyuNMAinO41ACKZrjVAIppuNYAinC41wCKh7jYAIp8uNkAimO42gCKoLjbAIpxuNwAioW4"
    "3QCKbbjeAIpiuN8Aim644ACKbLjhAIp5uOIAinu44wCKPrjkAIpouOUAjGK45gCMirjnAIyJuOgA"
    "jMq46QCMx7jqAIzIuOsAjMS47ACMsrjtAIzDuO4AjMK47wCMxbjwAI3huPEAjd+48gCN6LjzAI3v"
    "uPQAjfO49QCN+rj2AI3quPcAjeS4+ACN5rj5AI6yuPoAjwO4+wCPCbj8AI7+uP0Ajwq4/gCPn7lA"
    "AI+yuUEAkEu5QgCQSrlDAJBTuUQAkEK5RQCQVLlGAJA8uUcAkFW5SACQULlJAJBHuUoAkE+5SwCQ"
    "TrlMAJBNuU0AkFG5TgCQPrlPAJBBuVAAkRK5UQCRF7lSAJFsuVMAkWq5VACRablVAJHJuVYAkje5"
    "VwCSV7lYAJI4uVkAkj25WgCSQLlbAJI+uVwAklu5XQCSS7leAJJkuV8AklG5YACSNLlhAJJJuWIA"
    "kk25YwCSRblkAJI5uWUAkj+5ZgCSWrlnAJWYuWgAlpi5aQCWlLlqAJaVuWsAls25bACWy7ltAJbJ"
    "uW4Alsq5bwCW97lwAJb7uXEAlvm5cgCW9rlzAJdWuXQAl3S5dQCXdrl2AJgQuXcAmBG5eACYE7l5"
    "AJgKuXoAmBK5ewCYDLl8AJj8uX0AmPS5fgCY/bmhAJj+uaIAmbO5owCZsbmkAJm0uaUAmuG5pgCc"
    "6bmnAJ6CuagAnw65qQCfE7mqAJ8guasAUOe5rABQ7rmtAFDlua4AUNa5rwBQ7bmwAFDaubEAUNW5"
    "sgBQz7mzAFDRubQAUPG5tQBQzrm2AFDpubcAUWK5uABR87m5AFKDuboAUoK5uwBTMbm8AFOtub0A"
    "Vf65vgBWALm/AFYbucAAVhe5wQBV/bnCAFYUucMAVga5xABWCbnFAFYNucYAVg65xwBV97nIAFYW"
    "uckAVh+5ygBWCLnLAFYQucwAVfa5zQBXGLnOAFcWuc8AWHW50ABYfrnRAFiDudIAWJO50wBYirnU"
    "AFh5udUAWIW51gBYfbnXAFj9udgAWSW52QBZIrnaAFkkudsAWWq53ABZabndAFrhud4AWua53wBa"
    "6bngAFrXueEAWta54gBa2LnjAFrjueQAW3W55QBb3rnmAFvnuecAW+G56ABb5bnpAFvmueoAW+i5"
    "6wBb4rnsAFvkue0AW9+57gBcDbnvAFxiufAAXYS58QBdh7nyAF5bufMAXmO59ABeVbn1AF5XufYA"
    "XlS59wBe07n4AF7WufkAXwq5+gBfRrn7AF9wufwAX7m5/QBhR7n+AGE/ukAAYUu6QQBhd7pCAGFi"
    "ukMAYWO6RABhX7pFAGFaukYAYVi6RwBhdbpIAGIqukkAZIe6SgBkWLpLAGRUukwAZKS6TQBkeLpO"
    "AGRfuk8AZHq6UABkUbpRAGRnulIAZDS6UwBkbbpUAGR7ulUAZXK6VgBlobpXAGXXulgAZda6WQBm"
    "orpaAGaoulsAZp26XABpnLpdAGmoul4AaZW6XwBpwbpgAGmuumEAadO6YgBpy7pjAGmbumQAabe6"
    "ZQBpu7pmAGmrumcAabS6aABp0LppAGnNumoAaa26awBpzLpsAGmmum0AacO6bgBpo7pvAGtJunAA"
    "a0y6cQBsM7pyAG8zunMAbxS6dABu/rp1AG8TunYAbvS6dwBvKbp4AG8+unkAbyC6egBvLLp7AG8P"
    "unwAbwK6fQBvIrp+AG7/uqEAbu+6ogBvBrqjAG8xuqQAbzi6pQBvMrqmAG8juqcAbxW6qABvK7qp"
    "AG8vuqoAb4i6qwBvKrqsAG7suq0AbwG6rgBu8rqvAG7MurAAbve6sQBxlLqyAHGZurMAcX26tABx"
    "irq1AHGEurYAcZK6twByPrq4AHKSurkAcpa6ugBzRLq7AHNQurwAdGS6vQB0Y7q+AHRqur8AdHC6"
    "wAB0bbrBAHUEusIAdZG6wwB2J7rEAHYNusUAdgu6xgB2CbrHAHYTusgAduG6yQB247rKAHeEussA"
    "d326zAB3f7rNAHdhus4AeMG6zwB4n7rQAHinutEAeLO60gB4qbrTAHijutQAeY661QB5j7rWAHmN"
    "utcAei662AB6MbrZAHqqutoAeqm62wB67brcAHrvut0Ae6G63gB7lbrfAHuLuuAAe3W64QB7l7ri"
    "AHuduuMAe5S65AB7j7rlAHu4uuYAe4e65wB7hLroAHy5uukAfL266gB8vrrrAH27uuwAfbC67QB9"
    "nLruAH29uu8Afb668AB9oLrxAH3KuvIAfbS68wB9srr0AH2xuvUAfbq69gB9orr3AH2/uvgAfbW6"
    "+QB9uLr6AH2tuvsAfdK6/AB9x7r9AH2suv4Af3C7QAB/4LtBAH/hu0IAf9+7QwCAXrtEAIBau0UA"
    "gIe7RgCBULtHAIGAu0gAgY+7SQCBiLtKAIGKu0sAgX+7TACBgrtNAIHnu04Agfq7TwCCB7tQAIIU"
    "u1EAgh67UgCCS7tTAITJu1QAhL+7VQCExrtWAITEu1cAhJm7WACEnrtZAISyu1oAhJy7WwCEy7tc"
    "AIS4u10AhMC7XgCE07tfAISQu2AAhLy7YQCE0btiAITKu2MAhz+7ZACHHLtlAIc7u2YAhyK7ZwCH"
    "JbtoAIc0u2kAhxi7agCHVbtrAIc3u2wAhym7bQCI87tuAIkCu28AiPS7cACI+btxAIj4u3IAiP27"
    "cwCI6Lt0AIkau3UAiO+7dgCKprt3AIqMu3gAip67eQCKo7t6AIqNu3sAiqG7fACKk7t9AIqku34A"
    "iqq7oQCKpbuiAIqou6MAipi7pACKkbulAIqau6YAiqe7pwCMaruoAIyNu6kAjIy7qgCM07urAIzR"
    "u6wAjNK7rQCNa7uuAI2Zu68AjZW7sACN/LuxAI8Uu7IAjxK7swCPFbu0AI8Tu7UAj6O7tgCQYLu3"
    "AJBYu7gAkFy7uQCQY7u6AJBZu7sAkF67vACQYru9AJBdu74AkFu7vwCRGbvAAJEYu8EAkR67wgCR"
    "dbvDAJF4u8QAkXe7xQCRdLvGAJJ4u8cAkoC7yACShbvJAJKYu8oAkpa7ywCSe7vMAJKTu80Akpy7"
    "zgCSqLvPAJJ8u9AAkpG70QCVobvSAJWou9MAlam71ACVo7vVAJWlu9YAlaS71wCWmbvYAJacu9kA"
    "lpu72gCWzLvbAJbSu9wAlwC73QCXfLveAJeFu98Al/a74ACYF7vhAJgYu+IAmK+74wCYsbvkAJkD"
    "u+UAmQW75gCZDLvnAJkJu+gAmcG76QCar7vqAJqwu+sAmua77ACbQbvtAJtCu+4AnPS77wCc9rvw"
    "AJzzu/EAnry78gCfO7vzAJ9Ku/QAUQS79QBRALv2AFD7u/cAUPW7+ABQ+bv5AFECu/oAUQi7+wBR"
    "Cbv8AFEFu/0AUdy7/gBSh7xAAFKIvEEAUom8QgBSjbxDAFKKvEQAUvC8RQBTsrxGAFYuvEcAVju8"
    "SABWObxJAFYyvEoAVj+8SwBWNLxMAFYpvE0AVlO8TgBWTrxPAFZXvFAAVnS8UQBWNrxSAFYvvFMA"
    "VjC8VABYgLxVAFifvFYAWJ68VwBYs7xYAFicvFkAWK68WgBYqbxbAFimvFwAWW28XQBbCbxeAFr7"
    "vF8AWwu8YABa9bxhAFsMvGIAWwi8YwBb7rxkAFvsvGUAW+m8ZgBb67xnAFxkvGgAXGW8aQBdnbxq"
    "AF2UvGsAXmK8bABeX7xtAF5hvG4AXuK8bwBe2rxwAF7fvHEAXt28cgBe47xzAF7gvHQAX0i8dQBf"
    "cbx2AF+3vHcAX7W8eABhdrx5AGFnvHoAYW68ewBhXbx8AGFVvH0AYYK8fgBhfLyhAGFwvKIAYWu8"
    "owBhfrykAGGnvKUAYZC8pgBhq7ynAGGOvKgAYay8qQBhmryqAGGkvKsAYZS8rABhrrytAGIuvK4A"
    "ZGm8rwBkb7ywAGR5vLEAZJ68sgBksryzAGSIvLQAZJC8tQBksLy2AGSlvLcAZJO8uABklby5AGSp"
    "vLoAZJK8uwBkrry8AGStvL0AZKu8vgBkmry/AGSsvMAAZJm8wQBkorzCAGSzvMMAZXW8xABld7zF"
    "AGV4vMYAZq68xwBmq7zIAGa0vMkAZrG8ygBqI7zLAGofvMwAaei8zQBqAbzOAGoevM8Aahm80ABp"
    "/bzRAGohvNIAahO80wBqCrzUAGnzvNUAagK81gBqBbzXAGntvNgAahG82QBrULzaAGtOvNsAa6S8"
    "3ABrxbzdAGvGvN4Abz+83wBvfLzgAG+EvOEAb1G84gBvZrzjAG9UvOQAb4a85QBvbbzmAG9bvOcA"
    "b3i86ABvbrzpAG+OvOoAb3q86wBvcLzsAG9kvO0Ab5e87gBvWLzvAG7VvPAAb2+88QBvYLzyAG9f"
    "vPMAcZ+89ABxrLz1AHGxvPYAcai89wByVrz4AHKbvPkAc068+gBzV7z7AHRpvPwAdIu8/QB0g7z+"
    "AHR+vUAAdIC9QQB1f71CAHYgvUMAdim9RAB2H71FAHYkvUYAdia9RwB2Ib1IAHYivUkAdpq9SgB2"
    "ur1LAHbkvUwAd469TQB3h71OAHeMvU8Ad5G9UAB3i71RAHjLvVIAeMW9UwB4ur1UAHjKvVUAeL69"
    "VgB41b1XAHi8vVgAeNC9WQB6P71aAHo8vVsAekC9XAB6Pb1dAHo3vV4Aeju9XwB6r71gAHquvWEA"
    "e629YgB7sb1jAHvEvWQAe7S9ZQB7xr1mAHvHvWcAe8G9aAB7oL1pAHvMvWoAfMq9awB94L1sAH30"
    "vW0Afe+9bgB9+71vAH3YvXAAfey9cQB93b1yAH3ovXMAfeO9dAB92r11AH3evXYAfem9dwB9nr14"
    "AH3ZvXkAffK9egB9+b17AH91vXwAf3e9fQB/r71+AH/pvaEAgCa9ogCBm72jAIGcvaQAgZ29pQCB"
    "oL2mAIGavacAgZi9qACFF72pAIU9vaoAhRq9qwCE7r2sAIUsva0AhS29rgCFE72vAIURvbAAhSO9"
    "sQCFIb2yAIUUvbMAhOy9tACFJb21AIT/vbYAhQa9twCHgr24AId0vbkAh3a9ugCHYL27AIdmvbwA"
    "h3i9vQCHaL2+AIdZvb8Ah1e9wACHTL3BAIdTvcIAiFu9wwCIXb3EAIkQvcUAiQe9xgCJEr3HAIkT"
    "vcgAiRW9yQCJCr3KAIq8vcsAitK9zACKx73NAIrEvc4AipW9zwCKy73QAIr4vdEAirK90gCKyb3T"
    "AIrCvdQAir+91QCKsL3WAIrWvdcAis292ACKtr3ZAIq5vdoAitu92wCMTL3cAIxOvd0AjGy93gCM"
    "4L3fAIzeveAAjOa94QCM5L3iAIzsveMAjO295ACM4r3lAIzjveYAjNy95wCM6r3oAIzhvekAjW29"
    "6gCNn73rAI2jvewAjiu97QCOEL3uAI4dve8AjiK98ACOD73xAI4pvfIAjh+98wCOIb30AI4evfUA"
    "jrq99gCPHb33AI8bvfgAjx+9+QCPKb36AI8mvfsAjyq9/ACPHL39AI8evf4AjyW+QACQab5BAJBu"
    "vkIAkGi+QwCQbb5EAJB3vkUAkTC+RgCRLb5HAJEnvkgAkTG+SQCRh75KAJGJvksAkYu+TACRg75N"
    "AJLFvk4Akru+TwCSt75QAJLqvlEAkqy+UgCS5L5TAJLBvlQAkrO+VQCSvL5WAJLSvlcAkse+WACS"
    "8L5ZAJKyvloAla2+WwCVsb5cAJcEvl0Alwa+XgCXB75fAJcJvmAAl2C+YQCXjb5iAJeLvmMAl4++"
    "ZACYIb5lAJgrvmYAmBy+ZwCYs75oAJkKvmkAmRO+agCZEr5rAJkYvmwAmd2+bQCZ0L5uAJnfvm8A"
    "mdu+cACZ0b5xAJnVvnIAmdK+cwCZ2b50AJq3vnUAmu6+dgCa7753AJsnvngAm0W+eQCbRL56AJt3"
    "vnsAm2++fACdBr59AJ0Jvn4AnQO+oQCeqb6iAJ6+vqMAns6+pABYqL6lAJ9SvqYAURK+pwBRGL6o"
    "AFEUvqkAURC+qgBRFb6rAFGAvqwAUaq+rQBR3b6uAFKRvq8AUpO+sABS876xAFZZvrIAVmu+swBW"
    "eb60AFZpvrUAVmS+tgBWeL63AFZqvrgAVmi+uQBWZb66AFZxvrsAVm++vABWbL69AFZivr4AVna+"
    "vwBYwb7AAFi+vsEAWMe+wgBYxb7DAFluvsQAWx2+xQBbNL7GAFt4vscAW/C+yABcDr7JAF9KvsoA"
    "YbK+ywBhkb7MAGGpvs0AYYq+zgBhzb7PAGG2vtAAYb6+0QBhyr7SAGHIvtMAYjC+1ABkxb7VAGTB"
    "vtYAZMu+1wBku77YAGS8vtkAZNq+2gBkxL7bAGTHvtwAZMK+3QBkzb7eAGS/vt8AZNK+4ABk1L7h"
    "AGS+vuIAZXS+4wBmxr7kAGbJvuUAZrm+5gBmxL7nAGbHvugAZri+6QBqPb7qAGo4vusAajq+7ABq"
    "Wb7tAGprvu4Aali+7wBqOb7wAGpEvvEAamK+8gBqYb7zAGpLvvQAake+9QBqNb72AGpfvvcAaki+"
    "+ABrWb75AGt3vvoAbAW++wBvwr78AG+xvv0Ab6G+/gBvw79AAG+kv0EAb8G/QgBvp79DAG+zv0QA"
    "b8C/RQBvub9GAG+2v0cAb6a/SABvoL9JAG+0v0oAcb6/SwBxyb9MAHHQv00AcdK/TgBxyL9PAHHV"
    "v1AAcbm/UQBxzr9SAHHZv1MAcdy/VABxw79VAHHEv1YAc2i/VwB0nL9YAHSjv1kAdJi/WgB0n79b"
    "AHSev1wAdOK/XQB1DL9eAHUNv18AdjS/YAB2OL9hAHY6v2IAdue/YwB25b9kAHegv2UAd56/ZgB3"
    "n79nAHelv2gAeOi/aQB42r9qAHjsv2sAeOe/bAB5pr9tAHpNv24Aek6/bwB6Rr9wAHpMv3EAeku/"
    "cgB6ur9zAHvZv3QAfBG/dQB7yb92AHvkv3cAe9u/eAB74b95AHvpv3oAe+a/ewB81b98AHzWv30A"
    "fgq/fgB+Eb+hAH4Iv6IAfhu/owB+I7+kAH4ev6UAfh2/pgB+Cb+nAH4Qv6gAf3m/qQB/sr+qAH/w"
    "v6sAf/G/rAB/7r+tAIAov64AgbO/rwCBqb+wAIGov7EAgfu/sgCCCL+zAIJYv7QAglm/tQCFSr+2"
    "AIVZv7cAhUi/uACFaL+5AIVpv7oAhUO/uwCFSb+8AIVtv70AhWq/vgCFXr+/AIeDv8AAh5+/wQCH"
    "nr/CAIeiv8MAh42/xACIYb/FAIkqv8YAiTK/xwCJJb/IAIkrv8kAiSG/ygCJqr/LAImmv8wAiua/"
    "zQCK+r/OAIrrv88AivG/0ACLAL/RAIrcv9IAiue/0wCK7r/UAIr+v9UAiwG/1gCLAr/XAIr3v9gA"
    "iu2/2QCK87/aAIr2v9sAivy/3ACMa7/dAIxtv94AjJO/3wCM9L/gAI5Ev+EAjjG/4gCONL/jAI5C"
    "v+QAjjm/5QCONb/mAI87v+cAjy+/6ACPOL/pAI8zv+oAj6i/6wCPpr/sAJB1v+0AkHS/7gCQeL/v"
    "AJByv/AAkHy/8QCQer/yAJE0v/MAkZK/9ACTIL/1AJM2v/YAkvi/9wCTM7/4AJMvv/kAkyK/+gCS"
    "/L/7AJMrv/wAkwS//QCTGr/+AJMQwEAAkybAQQCTIcBCAJMVwEMAky7ARACTGcBFAJW7wEYAlqfA"
    "RwCWqMBIAJaqwEkAltXASgCXDsBLAJcRwEwAlxbATQCXDcBOAJcTwE8Alw/AUACXW8BRAJdcwFIA"
    "l2bAUwCXmMBUAJgwwFUAmDjAVgCYO8BXAJg3wFgAmC3AWQCYOcBaAJgkwFsAmRDAXACZKMBdAJke"
    "wF4AmRvAXwCZIcBgAJkawGEAme3AYgCZ4sBjAJnxwGQAmrjAZQCavMBmAJr7wGcAmu3AaACbKMBp"
    "AJuRwGoAnRXAawCdI8BsAJ0mwG0AnSjAbgCdEsBvAJ0bwHAAntjAcQCe1MByAJ+NwHMAn5zAdABR"
    "KsB1AFEfwHYAUSHAdwBRMsB4AFL1wHkAVo7AegBWgMB7AFaQwHwAVoXAfQBWh8B+AFaPwKEAWNXA"
    "ogBY08CjAFjRwKQAWM7ApQBbMMCmAFsqwKcAWyTAqABbesCpAFw3wKoAXGjAqwBdvMCsAF26wK0A"
    "Xb3ArgBduMCvAF5rwLAAX0zAsQBfvcCyAGHJwLMAYcLAtABhx8C1AGHmwLYAYcvAtwBiMsC4AGI0"
    "wLkAZM7AugBkysC7AGTYwLwAZODAvQBk8MC+AGTmwL8AZOzAwABk8cDBAGTiwMIAZO3AwwBlgsDE"
    "AGWDwMUAZtnAxgBm1sDHAGqAwMgAapTAyQBqhMDKAGqiwMsAapzAzABq28DNAGqjwM4Aan7AzwBq"
    "l8DQAGqQwNEAaqDA0gBrXMDTAGuuwNQAa9rA1QBsCMDWAG/YwNcAb/HA2ABv38DZAG/gwNoAb9vA"
    "2wBv5MDcAG/rwN0Ab+/A3gBvgMDfAG/swOAAb+HA4QBv6cDiAG/VwOMAb+7A5ABv8MDlAHHnwOYA"
    "cd/A5wBx7sDoAHHmwOkAceXA6gBx7cDrAHHswOwAcfTA7QBx4MDuAHI1wO8AckbA8ABzcMDxAHNy"
    "wPIAdKnA8wB0sMD0AHSmwPUAdKjA9gB2RsD3AHZCwPgAdkzA+QB26sD6AHezwPsAd6rA/AB3sMD9"
    "AHeswP4Ad6fBQAB3rcFBAHfvwUIAePfBQwB4+sFEAHj0wUUAeO/BRgB5AcFHAHmnwUgAearBSQB6"
    "V8FKAHq/wUsAfAfBTAB8DcFNAHv+wU4Ae/fBTwB8DMFQAHvgwVEAfODBUgB83MFTAHzewVQAfOLB"
    "VQB838FWAHzZwVcAfN3BWAB+LsFZAH4+wVoAfkbBWwB+N8FcAH4ywV0AfkPBXgB+K8FfAH49wWAA"
    "fjHBYQB+RcFiAH5BwWMAfjTBZAB+OcFlAH5IwWYAfjXBZwB+P8FoAH4vwWkAf0TBagB/88FrAH/8"
    "wWwAgHHBbQCAcsFuAIBwwW8AgG/BcACAc8FxAIHGwXIAgcPBcwCBusF0AIHCwXUAgcDBdgCBv8F3"
    "AIG9wXgAgcnBeQCBvsF6AIHowXsAggnBfACCccF9AIWqwX4AhYTBoQCFfsGiAIWcwaMAhZHBpACF"
    "lMGlAIWvwaYAhZvBpwCFh8GoAIWowakAhYrBqgCGZ8GrAIfAwawAh9HBrQCHs8GuAIfSwa8Ah8bB"
    "sACHq8GxAIe7wbIAh7rBswCHyMG0AIfLwbUAiTvBtgCJNsG3AIlEwbgAiTjBuQCJPcG6AImswbsA"
    "iw7BvACLF8G9AIsZwb4AixvBvwCLCsHAAIsgwcEAix3BwgCLBMHDAIsQwcQAjEHBxQCMP8HGAIxz"
    "wccAjPrByACM/cHJAIz8wcoAjPjBywCM+8HMAI2owc0AjknBzgCOS8HPAI5IwdAAjkrB0QCPRMHS"
    "AI8+wdMAj0LB1ACPRcHVAI8/wdYAkH/B1wCQfcHYAJCEwdkAkIHB2gCQgsHbAJCAwdwAkTnB3QCR"
    "o8HeAJGewd8AkZzB4ACTTcHhAJOCweIAkyjB4wCTdcHkAJNKweUAk2XB5gCTS8HnAJMYwegAk37B"
    "6QCTbMHqAJNbwesAk3DB7ACTWsHtAJNUwe4AlcrB7wCVy8HwAJXMwfEAlcjB8gCVxsHzAJaxwfQA"
    "lrjB9QCW1sH2AJccwfcAlx7B+ACXoMH5AJfTwfoAmEbB+wCYtsH8AJk1wf0AmgHB/gCZ/8JAAJuu"
    "wkEAm6vCQgCbqsJDAJutwkQAnTvCRQCdP8JGAJ6LwkcAns/CSACe3sJJAJ7cwkoAnt3CSwCe28JM"
    "AJ8+wk0An0vCTgBT4sJPAFaVwlAAVq7CUQBY2cJSAFjYwlMAWzjCVABfXcJVAGHjwlYAYjPCVwBk"
    "9MJYAGTywlkAZP7CWgBlBsJbAGT6wlwAZPvCXQBk98JeAGW3wl8AZtzCYABnJsJhAGqzwmIAaqzC"
    "YwBqw8JkAGq7wmUAarjCZgBqwsJnAGquwmgAaq/CaQBrX8JqAGt4wmsAa6/CbABwCcJtAHALwm4A"
    "b/7CbwBwBsJwAG/6wnEAcBHCcgBwD8JzAHH7wnQAcfzCdQBx/sJ2AHH4wncAc3fCeABzdcJ5AHSn"
    "wnoAdL/CewB1FcJ8AHZWwn0AdljCfgB2UsKhAHe9wqIAd7/CowB3u8KkAHe8wqUAeQ7CpgB5rsKn"
    "AHphwqgAemLCqQB6YMKqAHrEwqsAesXCrAB8K8KtAHwnwq4AfCrCrwB8HsKwAHwjwrEAfCHCsgB8"
    "58KzAH5UwrQAflXCtQB+XsK2AH5awrcAfmHCuAB+UsK5AH5ZwroAf0jCuwB/+cK8AH/7wr0AgHfC"
    "vgCAdsK/AIHNwsAAgc/CwQCCCsLCAIXPwsMAhanCxACFzcLFAIXQwsYAhcnCxwCFsMLIAIW6wskA"
    "hbnCygCFpsLLAIfvwswAh+zCzQCH8sLOAIfgws8AiYbC0ACJssLRAIn0wtIAiyjC0wCLOcLUAIss"
    "wtUAiyvC1gCMUMLXAI0FwtgAjlnC2QCOY8LaAI5mwtsAjmTC3ACOX8LdAI5Vwt4AjsDC3wCPScLg"
    "AI9NwuEAkIfC4gCQg8LjAJCIwuQAkavC5QCRrMLmAJHQwucAk5TC6ACTisLpAJOWwuoAk6LC6wCT"
    "s8LsAJOuwu0Ak6zC7gCTsMLvAJOYwvAAk5rC8QCTl8LyAJXUwvMAldbC9ACV0ML1AJXVwvYAluLC"
    "9wCW3ML4AJbZwvkAltvC+gCW3sL7AJckwvwAl6PC/QCXpsL+AJetw0AAl/nDQQCYTcNCAJhPw0MA"
    "mEzDRACYTsNFAJhTw0YAmLrDRwCZPsNIAJk/w0kAmT3DSgCZLsNLAJmlw0wAmg7DTQCawcNOAJsD"
    "w08AmwbDUACbT8NRAJtOw1IAm03DUwCbysNUAJvJw1UAm/3DVgCbyMNXAJvAw1gAnVHDWQCdXcNa"
    "AJ1gw1sAnuDDXACfFcNdAJ8sw14AUTPDXwBWpcNgAFjew2EAWN/DYgBY4sNjAFv1w2QAn5DDZQBe"
    "7MNmAGHyw2cAYffDaABh9sNpAGH1w2oAZQDDawBlD8NsAGbgw20AZt3DbgBq5cNvAGrdw3AAatrD"
    "cQBq08NyAHAbw3MAcB/DdABwKMN1AHAaw3YAcB3DdwBwFcN4AHAYw3kAcgbDegByDcN7AHJYw3wA"
    "cqLDfQBzeMN+AHN6w6EAdL3DogB0ysOjAHTjw6QAdYfDpQB1hsOmAHZfw6cAdmHDqAB3x8OpAHkZ"
    "w6oAebHDqwB6a8OsAHppw60AfD7DrgB8P8OvAHw4w7AAfD3DsQB8N8OyAHxAw7MAfmvDtAB+bcO1"
    "AH55w7YAfmnDtwB+asO4AH+Fw7kAfnPDugB/tsO7AH+5w7wAf7jDvQCB2MO+AIXpw78Ahd3DwACF"
    "6sPBAIXVw8IAheTDwwCF5cPEAIX3w8UAh/vDxgCIBcPHAIgNw8gAh/nDyQCH/sPKAIlgw8sAiV/D"
    "zACJVsPNAIlew84Ai0HDzwCLXMPQAItYw9EAi0nD0gCLWsPTAItOw9QAi0/D1QCLRsPWAItZw9cA"
    "jQjD2ACNCsPZAI58w9oAjnLD2wCOh8PcAI52w90AjmzD3gCOesPfAI50w+AAj1TD4QCPTsPiAI+t"
    "w+MAkIrD5ACQi8PlAJGxw+YAka7D5wCT4cPoAJPRw+kAk9/D6gCTw8PrAJPIw+wAk9zD7QCT3cPu"
    "AJPWw+8Ak+LD8ACTzcPxAJPYw/IAk+TD8wCT18P0AJPow/UAldzD9gCWtMP3AJbjw/gAlyrD+QCX"
    "J8P6AJdhw/sAl9zD/ACX+8P9AJhew/4AmFjEQACYW8RBAJi8xEIAmUXEQwCZScREAJoWxEUAmhnE"
    "RgCbDcRHAJvoxEgAm+fESQCb1sRKAJvbxEsAnYnETACdYcRNAJ1yxE4AnWrETwCdbMRQAJ6SxFEA"
    "npfEUgCek8RTAJ60xFQAUvjEVQBWqMRWAFa3xFcAVrbEWABWtMRZAFa8xFoAWOTEWwBbQMRcAFtD"
    "xF0AW33EXgBb9sRfAF3JxGAAYfjEYQBh+sRiAGUYxGMAZRTEZABlGcRlAGbmxGYAZyfEZwBq7MRo"
    "AHA+xGkAcDDEagBwMsRrAHIQxGwAc3vEbQB0z8RuAHZixG8AdmXEcAB5JsRxAHkqxHIAeSzEcwB5"
    "K8R0AHrHxHUAevbEdgB8TMR3AHxDxHgAfE3EeQB878R6AHzwxHsAj67EfAB+fcR9AH58xH4AfoLE"
    "oQB/TMSiAIAAxKMAgdrEpACCZsSlAIX7xKYAhfnEpwCGEcSoAIX6xKkAhgbEqgCGC8SrAIYHxKwA"
    "hgrErQCIFMSuAIgVxK8AiWTEsACJusSxAIn4xLIAi3DEswCLbMS0AItmxLUAi2/EtgCLX8S3AItr"
    "xLgAjQ/EuQCNDcS6AI6JxLsAjoHEvACOhcS9AI6CxL4AkbTEvwCRy8TAAJQYxMEAlAPEwgCT/cTD"
    "AJXhxMQAlzDExQCYxMTGAJlSxMcAmVHEyACZqMTJAJorxMoAmjDEywCaN8TMAJo1xM0AnBPEzgCc"
    "DcTPAJ55xNAAnrXE0QCe6MTSAJ8vxNMAn1/E1ACfY8TVAJ9hxNYAUTfE1wBROMTYAFbBxNkAVsDE"
    "2gBWwsTbAFkUxNwAXGzE3QBdzcTeAGH8xN8AYf7E4ABlHcThAGUcxOIAZZXE4wBm6cTkAGr7xOUA"
    "awTE5gBq+sTnAGuyxOgAcEzE6QByG8TqAHKnxOsAdNbE7AB01MTtAHZpxO4Ad9PE7wB8UMTwAH6P"
    "xPEAfozE8gB/vMTzAIYXxPQAhi3E9QCGGsT2AIgjxPcAiCLE+ACIIcT5AIgfxPoAiWrE+wCJbMT8"
    "AIm9xP0Ai3TE/gCLd8VAAIt9xUEAjRPFQgCOisVDAI6NxUQAjovFRQCPX8VGAI+vxUcAkbrFSACU"
    "LsVJAJQzxUoAlDXFSwCUOsVMAJQ4xU0AlDLFTgCUK8VPAJXixVAAlzjFUQCXOcVSAJcyxVMAl//F"
    "VACYZ8VVAJhlxVYAmVfFVwCaRcVYAJpDxVkAmkDFWgCaPsVbAJrPxVwAm1TFXQCbUcVeAJwtxV8A"
    "nCXFYACdr8VhAJ20xWIAncLFYwCduMVkAJ6dxWUAnu/FZgCfGcVnAJ9cxWgAn2bFaQCfZ8VqAFE8"
    "xWsAUTvFbABWyMVtAFbKxW4AVsnFbwBbf8VwAF3UxXEAXdLFcgBfTsVzAGH/xXQAZSTFdQBrCsV2"
    "AGthxXcAcFHFeABwWMV5AHOAxXoAdOTFewB1isV8AHZuxX0AdmzFfgB5s8WhAHxgxaIAfF/FowCA"
    "fsWkAIB9xaUAgd/FpgCJcsWnAIlvxagAifzFqQCLgMWqAI0WxasAjRfFrACOkcWtAI6Txa4Aj2HF"
    "rwCRSMWwAJRExbEAlFHFsgCUUsWzAJc9xbQAlz7FtQCXw8W2AJfBxbcAmGvFuACZVcW5AJpVxboA"
    "mk3FuwCa0sW8AJsaxb0AnEnFvgCcMcW/AJw+xcAAnDvFwQCd08XCAJ3XxcMAnzTFxACfbMXFAJ9q"
    "xcYAn5TFxwBWzMXIAF3WxckAYgDFygBlI8XLAGUrxcwAZSrFzQBm7MXOAGsQxc8AdNrF0AB6ysXR"
    "AHxkxdIAfGPF0wB8ZcXUAH6TxdUAfpbF1gB+lMXXAIHixdgAhjjF2QCGP8XaAIgxxdsAi4rF3ACQ"
    "kMXdAJCPxd4AlGPF3wCUYMXgAJRkxeEAl2jF4gCYb8XjAJlcxeQAmlrF5QCaW8XmAJpXxecAmtPF"
    "6ACa1MXpAJrRxeoAnFTF6wCcV8XsAJxWxe0AneXF7gCen8XvAJ70xfAAVtHF8QBY6cXyAGUsxfMA"
    "cF7F9AB2ccX1AHZyxfYAd9fF9wB/UMX4AH+IxfkAiDbF+gCIOcX7AIhixfwAi5PF/QCLksX+AIuW"
    "xkAAgnfGQQCNG8ZCAJHAxkMAlGrGRACXQsZFAJdIxkYAl0TGRwCXxsZIAJhwxkkAml/GSgCbIsZL"
    "AJtYxkwAnF/GTQCd+cZOAJ36xk8AnnzGUACefcZRAJ8HxlIAn3fGUwCfcsZUAF7zxlUAaxbGVgBw"
    "Y8ZXAHxsxlgAfG7GWQCIO8ZaAInAxlsAjqHGXACRwcZdAJRyxl4AlHDGXwCYccZgAJlexmEAmtbG"
    "YgCbI8ZjAJ7MxmQAcGTGZQB32sZmAIuaxmcAlHfGaACXycZpAJpixmoAmmXGawB+nMZsAIucxm0A"
    "jqrGbgCRxcZvAJR9xnAAlH7GcQCUfMZyAJx3xnMAnHjGdACe98Z1AIxUxnYAlH/GdwCeGsZ4AHIo"
    "xnkAmmrGegCbMcZ7AJ4bxnwAnh7GfQB8csZ+AE5CyUAATlzJQQBR9clCAFMayUMAU4LJRABOB8lF"
    "AE4MyUYATkfJRwBOjclIAFbXyUkA+gzJSgBcbslLAF9zyUwATg/JTQBRh8lOAE4OyU8ATi7JUABO"
    "k8lRAE7CyVIATsnJUwBOyMlUAFGYyVUAUvzJVgBTbMlXAFO5yVgAVyDJWQBZA8laAFksyVsAXBDJ"
    "XABd/8ldAGXhyV4Aa7PJXwBrzMlgAGwUyWEAcj/JYgBOMcljAE48yWQATujJZQBO3MlmAE7pyWcA"
    "TuHJaABO3clpAE7ayWoAUgzJawBTHMlsAFNMyW0AVyLJbgBXI8lvAFkXyXAAWS/JcQBbgclyAFuE"
    "yXMAXBLJdABcO8l1AFx0yXYAXHPJdwBeBMl4AF6AyXkAXoLJegBfycl7AGIJyXwAYlDJfQBsFcl+"
    "AGw2yaEAbEPJogBsP8mjAGw7yaQAcq7JpQBysMmmAHOKyacAebjJqACAismpAJYeyaoATw7JqwBP"
    "GMmsAE8sya0ATvXJrgBPFMmvAE7xybAATwDJsQBO98myAE8IybMATx3JtABPAsm1AE8FybYATyLJ"
    "twBPE8m4AE8EybkATvTJugBPEsm7AFGxybwAUhPJvQBSCcm+AFIQyb8AUqbJwABTIsnBAFMfycIA"
    "U03JwwBTisnEAFQHycUAVuHJxgBW38nHAFcuycgAVyrJyQBXNMnKAFk8ycsAWYDJzABZfMnNAFmF"
    "yc4AWXvJzwBZfsnQAFl3ydEAWX/J0gBbVsnTAFwVydQAXCXJ1QBcfMnWAFx6ydcAXHvJ2ABcfsnZ"
    "AF3fydoAXnXJ2wBehMncAF8Cyd0AXxrJ3gBfdMnfAF/VyeAAX9TJ4QBfz8niAGJcyeMAYl7J5ABi"
    "ZMnlAGJhyeYAYmbJ5wBiYsnoAGJZyekAYmDJ6gBiWsnrAGJlyewAZe/J7QBl7snuAGc+ye8AZznJ"
    "8ABnOMnxAGc7yfIAZzrJ8wBnP8n0AGc8yfUAZzPJ9gBsGMn3AGxGyfgAbFLJ+QBsXMn6AGxPyfsA"
    "bErJ/ABsVMn9AGxLyf4AbEzKQABwccpBAHJeykIAcrTKQwBytcpEAHOOykUAdSrKRgB2f8pHAHp1"
    "ykgAf1HKSQCCeMpKAIJ8yksAgoDKTACCfcpNAIJ/yk4Ahk3KTwCJfspQAJCZylEAkJfKUgCQmMpT"
    "AJCbylQAkJTKVQCWIspWAJYkylcAliDKWACWI8pZAE9WyloATzvKWwBPYspcAE9Jyl0AT1PKXgBP"
    "ZMpfAE8+ymAAT2fKYQBPUspiAE9fymMAT0HKZABPWMplAE8tymYATzPKZwBPP8poAE9hymkAUY/K"
    "agBRucprAFIcymwAUh7KbQBSIcpuAFKtym8AUq7KcABTCcpxAFNjynIAU3LKcwBTjsp0AFOPynUA"
    "VDDKdgBUN8p3AFQqyngAVFTKeQBURcp6AFQZynsAVBzKfABUJcp9AFQYyn4AVD3KoQBUT8qiAFRB"
    "yqMAVCjKpABUJMqlAFRHyqYAVu7KpwBW58qoAFblyqkAV0HKqgBXRcqrAFdMyqwAV0nKrQBXS8qu"
    "AFdSyq8AWQbKsABZQMqxAFmmyrIAWZjKswBZoMq0AFmXyrUAWY7KtgBZosq3AFmQyrgAWY/KuQBZ"
    "p8q6AFmhyrsAW47KvABbksq9AFwoyr4AXCrKvwBcjcrAAFyPysEAXIjKwgBci8rDAFyJysQAXJLK"
    "xQBcisrGAFyGyscAXJPKyABclcrJAF3gysoAXgrKywBeDsrMAF6Lys0AXonKzgBejMrPAF6IytAA"
    "Xo3K0QBfBcrSAF8dytMAX3jK1ABfdsrVAF/SytYAX9HK1wBf0MrYAF/tytkAX+jK2gBf7srbAF/z"
    "ytwAX+HK3QBf5MreAF/jyt8AX/rK4ABf78rhAF/3yuIAX/vK4wBgAMrkAF/0yuUAYjrK5gBig8rn"
    "AGKMyugAYo7K6QBij8rqAGKUyusAYofK7ABiccrtAGJ7yu4AYnrK7wBicMrwAGKByvEAYojK8gBi"
    "d8rzAGJ9yvQAYnLK9QBidMr2AGU3yvcAZfDK+ABl9Mr5AGXzyvoAZfLK+wBl9cr8AGdFyv0AZ0fK"
    "/gBnWctAAGdVy0EAZ0zLQgBnSMtDAGddy0QAZ03LRQBnWstGAGdLy0cAa9DLSABsGctJAGway0oA"
    "bHjLSwBsZ8tMAGxry00AbITLTgBsi8tPAGyPy1AAbHHLUQBsb8tSAGxpy1MAbJrLVABsbctVAGyH"
    "y1YAbJXLVwBsnMtYAGxmy1kAbHPLWgBsZctbAGx7y1wAbI7LXQBwdMteAHB6y18AcmPLYAByv8th"
    "AHK9y2IAcsPLYwByxstkAHLBy2UAcrrLZgByxctnAHOVy2gAc5fLaQBzk8tqAHOUy2sAc5LLbAB1"
    "OsttAHU5y24AdZTLbwB1lctwAHaBy3EAeT3LcgCANMtzAICVy3QAgJnLdQCAkMt2AICSy3cAgJzL"
    "eACCkMt5AIKPy3oAgoXLewCCjst8AIKRy30AgpPLfgCCisuhAIKDy6IAgoTLowCMeMukAI/Jy6UA"
    "j7/LpgCQn8unAJChy6gAkKXLqQCQnsuqAJCny6sAkKDLrACWMMutAJYoy64Ali/LrwCWLcuwAE4z"
    "y7EAT5jLsgBPfMuzAE+Fy7QAT33LtQBPgMu2AE+Hy7cAT3bLuABPdMu5AE+Jy7oAT4TLuwBPd8u8"
    "AE9My70AT5fLvgBPasu/AE+ay8AAT3nLwQBPgcvCAE94y8MAT5DLxABPnMvFAE+Uy8YAT57LxwBP"
    "ksvIAE+Cy8kAT5XLygBPa8vLAE9uy8wAUZ7LzQBRvMvOAFG+y88AUjXL0ABSMsvRAFIzy9IAUkbL"
    "0wBSMcvUAFK8y9UAUwrL1gBTC8vXAFM8y9gAU5LL2QBTlMvaAFSHy9sAVH/L3ABUgcvdAFSRy94A"
    "VILL3wBUiMvgAFRry+EAVHrL4gBUfsvjAFRly+QAVGzL5QBUdMvmAFRmy+cAVI3L6ABUb8vpAFRh"
    "y+oAVGDL6wBUmMvsAFRjy+0AVGfL7gBUZMvvAFb3y/AAVvnL8QBXb8vyAFdyy/MAV23L9ABXa8v1"
    "AFdxy/YAV3DL9wBXdsv4AFeAy/kAV3XL+gBXe8v7AFdzy/wAV3TL/QBXYsv+AFdozEAAV33MQQBZ"
    "DMxCAFlFzEMAWbXMRABZusxFAFnPzEYAWc7MRwBZssxIAFnMzEkAWcHMSgBZtsxLAFm8zEwAWcPM"
    "TQBZ1sxOAFmxzE8AWb3MUABZwMxRAFnIzFIAWbTMUwBZx8xUAFtizFUAW2XMVgBbk8xXAFuVzFgA"
    "XETMWQBcR8xaAFyuzFsAXKTMXABcoMxdAFy1zF4AXK/MXwBcqMxgAFyszGEAXJ/MYgBco8xjAFyt"
    "zGQAXKLMZQBcqsxmAFynzGcAXJ3MaABcpcxpAFy2zGoAXLDMawBcpsxsAF4XzG0AXhTMbgBeGcxv"
    "AF8ozHAAXyLMcQBfI8xyAF8kzHMAX1TMdABfgsx1AF9+zHYAX33MdwBf3sx4AF/lzHkAYC3MegBg"
    "Jsx7AGAZzHwAYDLMfQBgC8x+AGA0zKEAYArMogBgF8yjAGAzzKQAYBrMpQBgHsymAGAszKcAYCLM"
    "qABgDcypAGAQzKoAYC7MqwBgE8ysAGARzK0AYAzMrgBgCcyvAGAczLAAYhTMsQBiPcyyAGKtzLMA"
    "YrTMtABi0cy1AGK+zLYAYqrMtwBitsy4AGLKzLkAYq7MugBis8y7AGKvzLwAYrvMvQBiqcy+AGKw"
    "zL8AYrjMwABlPczBAGWozMIAZbvMwwBmCczEAGX8zMUAZgTMxgBmEszHAGYIzMgAZfvMyQBmA8zK"
    "AGYLzMsAZg3MzABmBczNAGX9zM4AZhHMzwBmEMzQAGb2zNEAZwrM0gBnhczTAGdszNQAZ47M1QBn"
    "kszWAGd2zNcAZ3vM2ABnmMzZAGeGzNoAZ4TM2wBndMzcAGeNzN0AZ4zM3gBneszfAGefzOAAZ5HM"
    "4QBnmcziAGeDzOMAZ33M5ABngczlAGd4zOYAZ3nM5wBnlMzoAGslzOkAa4DM6gBrfszrAGvezOwA"
    "bB3M7QBsk8zuAGzszO8AbOvM8ABs7szxAGzZzPIAbLbM8wBs1Mz0AGytzPUAbOfM9gBst8z3AGzQ"
    "zPgAbMLM+QBsusz6AGzDzPsAbMbM/ABs7cz9AGzyzP4AbNLNQABs3c1BAGy0zUIAbIrNQwBsnc1E"
    "AGyAzUUAbN7NRgBswM1HAG0wzUgAbM3NSQBsx81KAGywzUsAbPnNTABsz81NAGzpzU4AbNHNTwBw"
    "lM1QAHCYzVEAcIXNUgBwk81TAHCGzVQAcITNVQBwkc1WAHCWzVcAcILNWABwms1ZAHCDzVoAcmrN"
    "WwBy1s1cAHLLzV0ActjNXgByyc1fAHLczWAActLNYQBy1M1iAHLazWMAcszNZABy0c1lAHOkzWYA"
    "c6HNZwBzrc1oAHOmzWkAc6LNagBzoM1rAHOszWwAc53NbQB03c1uAHTozW8AdT/NcAB1QM1xAHU+"
    "zXIAdYzNcwB1mM10AHavzXUAdvPNdgB28c13AHbwzXgAdvXNeQB3+M16AHf8zXsAd/nNfAB3+819"
    "AHf6zX4Ad/fNoQB5Qs2iAHk/zaMAecXNpAB6eM2lAHp7zaYAevvNpwB8dc2oAHz9zakAgDXNqgCA"
    "j82rAICuzawAgKPNrQCAuM2uAIC1za8AgK3NsACCIM2xAIKgzbIAgsDNswCCq820AIKazbUAgpjN"
    "tgCCm823AIK1zbgAgqfNuQCCrs26AIK8zbsAgp7NvACCus29AIK0zb4AgqjNvwCCoc3AAIKpzcEA"
    "gsLNwgCCpM3DAILDzcQAgrbNxQCCos3GAIZwzccAhm/NyACGbc3JAIZuzcoAjFbNywCP0s3MAI/L"
    "zc0Aj9PNzgCPzc3PAI/WzdAAj9XN0QCP183SAJCyzdMAkLTN1ACQr83VAJCzzdYAkLDN1wCWOc3Y"
    "AJY9zdkAljzN2gCWOs3bAJZDzdwAT83N3QBPxc3eAE/Tzd8AT7LN4ABPyc3hAE/LzeIAT8HN4wBP"
    "1M3kAE/czeUAT9nN5gBPu83nAE+zzegAT9vN6QBPx83qAE/WzesAT7rN7ABPwM3tAE+5ze4AT+zN"
    "7wBSRM3wAFJJzfEAUsDN8gBSws3zAFM9zfQAU3zN9QBTl832AFOWzfcAU5nN+ABTmM35AFS6zfoA"
    "VKHN+wBUrc38AFSlzf0AVM/N/gBUw85AAIMNzkEAVLfOQgBUrs5DAFTWzkQAVLbORQBUxc5GAFTG"
    "zkcAVKDOSABUcM5JAFS8zkoAVKLOSwBUvs5MAFRyzk0AVN7OTgBUsM5PAFe1zlAAV57OUQBXn85S"
    "AFekzlMAV4zOVABXl85VAFedzlYAV5vOVwBXlM5YAFeYzlkAV4/OWgBXmc5bAFelzlwAV5rOXQBX"
    "lc5eAFj0zl8AWQ3OYABZU85hAFnhzmIAWd7OYwBZ7s5kAFoAzmUAWfHOZgBZ3c5nAFn6zmgAWf3O"
    "aQBZ/M5qAFn2zmsAWeTObABZ8s5tAFn3zm4AWdvObwBZ6c5wAFnzznEAWfXOcgBZ4M5zAFn+znQA"
    "WfTOdQBZ7c52AFuozncAXEzOeABc0M55AFzYznoAXMzOewBc1858AFzLzn0AXNvOfgBc3s6hAFza"
    "zqIAXMnOowBcx86kAFzKzqUAXNbOpgBc086nAFzUzqgAXM/OqQBcyM6qAFzGzqsAXM7OrABc386t"
    "AFz4zq4AXfnOrwBeIc6wAF4izrEAXiPOsgBeIM6zAF4kzrQAXrDOtQBepM62AF6izrcAXpvOuABe"
    "o865AF6lzroAXwfOuwBfLs68AF9Wzr0AX4bOvgBgN86/AGA5zsAAYFTOwQBgcs7CAGBezsMAYEXO"
    "xABgU87FAGBHzsYAYEnOxwBgW87IAGBMzskAYEDOygBgQs7LAGBfzswAYCTOzQBgRM7OAGBYzs8A"
    "YGbO0ABgbs7RAGJCztIAYkPO0wBiz87UAGMNztUAYwvO1gBi9c7XAGMOztgAYwPO2QBi687aAGL5"
    "ztsAYw/O3ABjDM7dAGL4zt4AYvbO3wBjAM7gAGMTzuEAYxTO4gBi+s7jAGMVzuQAYvvO5QBi8M7m"
    "AGVBzucAZUPO6ABlqs7pAGW/zuoAZjbO6wBmIc7sAGYyzu0AZjXO7gBmHM7vAGYmzvAAZiLO8QBm"
    "M87yAGYrzvMAZjrO9ABmHc71AGY0zvYAZjnO9wBmLs74AGcPzvkAZxDO+gBnwc77AGfyzvwAZ8jO"
    "/QBnus7+AGfcz0AAZ7vPQQBn+M9CAGfYz0MAZ8DPRABnt89FAGfFz0YAZ+vPRwBn5M9IAGffz0kA"
    "Z7XPSgBnzc9LAGezz0wAZ/fPTQBn9s9OAGfuz08AZ+PPUABnws9RAGe5z1IAZ87PUwBn589UAGfw"
    "z1UAZ7LPVgBn/M9XAGfGz1gAZ+3PWQBnzM9aAGeuz1sAZ+bPXABn289dAGf6z14AZ8nPXwBnys9g"
    "AGfDz2EAZ+rPYgBny89jAGsoz2QAa4LPZQBrhM9mAGu2z2cAa9bPaABr2M9pAGvgz2oAbCDPawBs"
    "Ic9sAG0oz20AbTTPbgBtLc9vAG0fz3AAbTzPcQBtP89yAG0Sz3MAbQrPdABs2s91AG0zz3YAbQTP"
    "dwBtGc94AG06z3kAbRrPegBtEc97AG0Az3wAbR3PfQBtQs9+AG0Bz6EAbRjPogBtN8+jAG0Dz6QA"
    "bQ/PpQBtQM+mAG0Hz6cAbSDPqABtLM+pAG0Iz6oAbSLPqwBtCc+sAG0Qz60AcLfPrgBwn8+vAHC+"
    "z7AAcLHPsQBwsM+yAHChz7MAcLTPtABwtc+1AHCpz7YAckHPtwBySc+4AHJKz7kAcmzPugBycM+7"
    "AHJzz7wAcm7PvQByys++AHLkz78AcujPwABy68/BAHLfz8IAcurPwwBy5s/EAHLjz8UAc4XPxgBz"
    "zM/HAHPCz8gAc8jPyQBzxc/KAHO5z8sAc7bPzABztc/NAHO0z84Ac+vPzwBzv8/QAHPHz9EAc77P"
    "0gBzw8/TAHPGz9QAc7jP1QBzy8/WAHTsz9cAdO7P2AB1Ls/ZAHVHz9oAdUjP2wB1p8/cAHWqz90A"
    "dnnP3gB2xM/fAHcIz+AAdwPP4QB3BM/iAHcFz+MAdwrP5AB298/lAHb7z+YAdvrP5wB358/oAHfo"
    "z+kAeAbP6gB4Ec/rAHgSz+wAeAXP7QB4EM/uAHgPz+8AeA7P8AB4Cc/xAHgDz/IAeBPP8wB5Ss/0"
    "AHlMz/UAeUvP9gB5Rc/3AHlEz/gAedXP+QB5zc/6AHnPz/sAedbP/AB5zs/9AHqAz/4Aen7QQAB6"
    "0dBBAHsA0EIAewHQQwB8etBEAHx40EUAfHnQRgB8f9BHAHyA0EgAfIHQSQB9A9BKAH0I0EsAfQHQ"
    "TAB/WNBNAH+R0E4Af43QTwB/vtBQAIAH0FEAgA7QUgCAD9BTAIAU0FQAgDfQVQCA2NBWAIDH0FcA"
    "gODQWACA0dBZAIDI0FoAgMLQWwCA0NBcAIDF0F0AgOPQXgCA2dBfAIDc0GAAgMrQYQCA1dBiAIDJ"
    "0GMAgM/QZACA19BlAIDm0GYAgM3QZwCB/9BoAIIh0GkAgpTQagCC2dBrAIL+0GwAgvnQbQCDB9Bu"
    "AILo0G8AgwDQcACC1dBxAIM60HIAguvQcwCC1tB0AIL00HUAguzQdgCC4dB3AILy0HgAgvXQeQCD"
    "DNB6AIL70HsAgvbQfACC8NB9AILq0H4AguTQoQCC4NCiAIL60KMAgvPQpACC7dClAIZ30KYAhnTQ"
    "pwCGfNCoAIZz0KkAiEHQqgCITtCrAIhn0KwAiGrQrQCIadCuAInT0K8AigTQsACKB9CxAI1y0LIA"
    "j+PQswCP4dC0AI/u0LUAj+DQtgCQ8dC3AJC90LgAkL/QuQCQ1dC6AJDF0LsAkL7QvACQx9C9AJDL"
    "0L4AkMjQvwCR1NDAAJHT0MEAllTQwgCWT9DDAJZR0MQAllPQxQCWStDGAJZO0McAUB7QyABQBdDJ"
    "AFAH0MoAUBPQywBQItDMAFAw0M0AUBvQzgBP9dDPAE/00NAAUDPQ0QBQN9DSAFAs0NMAT/bQ1ABP"
    "99DVAFAX0NYAUBzQ1wBQINDYAFAn0NkAUDXQ2gBQL9DbAFAx0NwAUA7Q3QBRWtDeAFGU0N8AUZPQ"
    "4ABRytDhAFHE0OIAUcXQ4wBRyNDkAFHO0OUAUmHQ5gBSWtDnAFJS0OgAUl7Q6QBSX9DqAFJV0OsA"
    "UmLQ7ABSzdDtAFMO0O4AU57Q7wBVJtDwAFTi0PEAVRfQ8gBVEtDzAFTn0PQAVPPQ9QBU5ND2AFUa"
    "0PcAVP/Q+ABVBND5AFUI0PoAVOvQ+wBVEdD8AFUF0P0AVPHQ/gBVCtFAAFT70UEAVPfRQgBU+NFD"
    "AFTg0UQAVQ7RRQBVA9FGAFUL0UcAVwHRSABXAtFJAFfM0UoAWDLRSwBX1dFMAFfS0U0AV7rRTgBX"
    "xtFPAFe90VAAV7zRUQBXuNFSAFe20VMAV7/RVABXx9FVAFfQ0VYAV7nRVwBXwdFYAFkO0VkAWUrR"
    "WgBaGdFbAFoW0VwAWi3RXQBaLtFeAFoV0V8AWg/RYABaF9FhAFoK0WIAWh7RYwBaM9FkAFts0WUA"
    "W6fRZgBbrdFnAFus0WgAXAPRaQBcVtFqAFxU0WsAXOzRbABc/9FtAFzu0W4AXPHRbwBc99FwAF0A"
    "0XEAXPnRcgBeKdFzAF4o0XQAXqjRdQBertF2AF6q0XcAXqzReABfM9F5AF8w0XoAX2fRewBgXdF8"
    "AGBa0X0AYGfRfgBgQdGhAGCi0aIAYIjRowBggNGkAGCS0aUAYIHRpgBgndGnAGCD0agAYJXRqQBg"
    "m9GqAGCX0asAYIfRrABgnNGtAGCO0a4AYhnRrwBiRtGwAGLy0bEAYxDRsgBjVtGzAGMs0bQAY0TR"
    "tQBjRdG2AGM20bcAY0PRuABj5NG5AGM50boAY0vRuwBjStG8AGM80b0AYynRvgBjQdG/AGM00cAA"
    "Y1jRwQBjVNHCAGNZ0cMAYy3RxABjR9HFAGMz0cYAY1rRxwBjUdHIAGM40ckAY1fRygBjQNHLAGNI"
    "0cwAZUrRzQBlRtHOAGXG0c8AZcPR0ABlxNHRAGXC0dIAZkrR0wBmX9HUAGZH0dUAZlHR1gBnEtHX"
    "AGcT0dgAaB/R2QBoGtHaAGhJ0dsAaDLR3ABoM9HdAGg70d4AaEvR3wBoT9HgAGgW0eEAaDHR4gBo"
    "HNHjAGg10eQAaCvR5QBoLdHmAGgv0ecAaE7R6ABoRNHpAGg00eoAaB3R6wBoEtHsAGgU0e0AaCbR"
    "7gBoKNHvAGgu0fAAaE3R8QBoOtHyAGgl0fMAaCDR9ABrLNH1AGsv0fYAay3R9wBrMdH4AGs00fkA"
    "a23R+gCAgtH7AGuI0fwAa+bR/QBr5NH+AGvo0kAAa+PSQQBr4tJCAGvn0kMAbCXSRABtetJFAG1j"
    "0kYAbWTSRwBtdtJIAG0N0kkAbWHSSgBtktJLAG1Y0kwAbWLSTQBtbdJOAG1v0k8AbZHSUABtjdJR"
    "AG3v0lIAbX/SUwBthtJUAG1e0lUAbWfSVgBtYNJXAG2X0lgAbXDSWQBtfNJaAG1f0lsAbYLSXABt"
    "mNJdAG0v0l4AbWjSXwBti9JgAG1+0mEAbYDSYgBthNJjAG0W0mQAbYPSZQBte9JmAG190mcAbXXS"
    "aABtkNJpAHDc0moAcNPSawBw0dJsAHDd0m0AcMvSbgB/OdJvAHDi0nAAcNfScQBw0tJyAHDe0nMA"
    "cODSdABw1NJ1AHDN0nYAcMXSdwBwxtJ4AHDH0nkAcNrSegBwztJ7AHDh0nwAckLSfQByeNJ+AHJ3"
    "0qEAcnbSogBzANKjAHL60qQAcvTSpQBy/tKmAHL20qcAcvPSqABy+9KpAHMB0qoAc9PSqwBz2dKs"
    "AHPl0q0Ac9bSrgBzvNKvAHPn0rAAc+PSsQBz6dKyAHPc0rMAc9LStABz29K1AHPU0rYAc93StwBz"
    "2tK4AHPX0rkAc9jSugBz6NK7AHTe0rwAdN/SvQB09NK+AHT10r8AdSHSwAB1W9LBAHVf0sIAdbDS"
    "wwB1wdLEAHW70sUAdcTSxgB1wNLHAHW/0sgAdbbSyQB1utLKAHaK0ssAdsnSzAB3HdLNAHcb0s4A"
    "dxDSzwB3E9LQAHcS0tEAdyPS0gB3EdLTAHcV0tQAdxnS1QB3GtLWAHci0tcAdyfS2AB4I9LZAHgs"
    "0toAeCLS2wB4NdLcAHgv0t0AeCjS3gB4LtLfAHgr0uAAeCHS4QB4KdLiAHgz0uMAeCrS5AB4MdLl"
    "AHlU0uYAeVvS5wB5T9LoAHlc0ukAeVPS6gB5UtLrAHlR0uwAeevS7QB57NLuAHng0u8Aee7S8AB5"
    "7dLxAHnq0vIAedzS8wB53tL0AHnd0vUAeobS9gB6idL3AHqF0vgAeovS+QB6jNL6AHqK0vsAeofS"
    "/AB62NL9AHsQ0v4AewTTQAB7E9NBAHsF00IAew/TQwB7CNNEAHsK00UAew7TRgB7CdNHAHsS00gA"
    "fITTSQB8kdNKAHyK00sAfIzTTAB8iNNNAHyN004AfIXTTwB9HtNQAH0d01EAfRHTUgB9DtNTAH0Y"
    "01QAfRbTVQB9E9NWAH0f01cAfRLTWAB9D9NZAH0M01oAf1zTWwB/YdNcAH9e010Af2DTXgB/XdNf"
    "AH9b02AAf5bTYQB/ktNiAH/D02MAf8LTZAB/wNNlAIAW02YAgD7TZwCAOdNoAID602kAgPLTagCA"
    "+dNrAID102wAgQHTbQCA+9NuAIEA028AggHTcACCL9NxAIIl03IAgzPTcwCDLdN0AINE03UAgxnT"
    "dgCDUdN3AIMl03gAg1bTeQCDP9N6AINB03sAgybTfACDHNN9AIMi034Ag0LToQCDTtOiAIMb06MA"
    "gyrTpACDCNOlAIM806YAg03TpwCDFtOoAIMk06kAgyDTqgCDN9OrAIMv06wAgynTrQCDR9OuAINF"
    "068Ag0zTsACDU9OxAIMe07IAgyzTswCDS9O0AIMn07UAg0jTtgCGU9O3AIZS07gAhqLTuQCGqNO6"
    "AIaW07sAho3TvACGkdO9AIae074AhofTvwCGl9PAAIaG08EAhovTwgCGmtPDAIaF08QAhqXTxQCG"
    "mdPGAIah08cAhqfTyACGldPJAIaY08oAho7TywCGndPMAIaQ080AhpTTzgCIQ9PPAIhE09AAiG3T"
    "0QCIddPSAIh209MAiHLT1ACIgNPVAIhx09YAiH/T1wCIb9PYAIiD09kAiH7T2gCIdNPbAIh809wA"
    "ihLT3QCMR9PeAIxX098AjHvT4ACMpNPhAIyj0+IAjXbT4wCNeNPkAI210+UAjbfT5gCNttPnAI7R"
    "0+gAjtPT6QCP/tPqAI/10+sAkALT7ACP/9PtAI/70+4AkATT7wCP/NPwAI/20/EAkNbT8gCQ4NPz"
    "AJDZ0/QAkNrT9QCQ49P2AJDf0/cAkOXT+ACQ2NP5AJDb0/oAkNfT+wCQ3NP8AJDk0/0AkVDT/gCR"
    "TtRAAJFP1EEAkdXUQgCR4tRDAJHa1EQAllzURQCWX9RGAJa81EcAmOPUSACa39RJAJsv1EoATn/U"
    "SwBQcNRMAFBq1E0AUGHUTgBQXtRPAFBg1FAAUFPUUQBQS9RSAFBd1FMAUHLUVABQSNRVAFBN1FYA"
    "UEHUVwBQW9RYAFBK1FkAUGLUWgBQFdRbAFBF1FwAUF/UXQBQadReAFBr1F8AUGPUYABQZNRhAFBG"
    "1GIAUEDUYwBQbtRkAFBz1GUAUFfUZgBQUdRnAFHQ1GgAUmvUaQBSbdRqAFJs1GsAUm7UbABS1tRt"
    "AFLT1G4AUy3UbwBTnNRwAFV11HEAVXbUcgBVPNRzAFVN1HQAVVDUdQBVNNR2AFUq1HcAVVHUeABV"
    "YtR5AFU21HoAVTXUewBVMNR8AFVS1H0AVUXUfgBVDNShAFUy1KIAVWXUowBVTtSkAFU51KUAVUjU"
    "pgBVLdSnAFU71KgAVUDUqQBVS9SqAFcK1KsAVwfUrABX+9StAFgU1K4AV+LUrwBX9tSwAFfc1LEA"
    "V/TUsgBYANSzAFft1LQAV/3UtQBYCNS2AFf41LcAWAvUuABX89S5AFfP1LoAWAfUuwBX7tS8AFfj"
    "1L0AV/LUvgBX5dS/AFfs1MAAV+HUwQBYDtTCAFf81MMAWBDUxABX59TFAFgB1MYAWAzUxwBX8dTI"
    "AFfp1MkAV/DUygBYDdTLAFgE1MwAWVzUzQBaYNTOAFpY1M8AWlXU0ABaZ9TRAFpe1NIAWjjU0wBa"
    "NdTUAFpt1NUAWlDU1gBaX9TXAFpl1NgAWmzU2QBaU9TaAFpk1NsAWlfU3ABaQ9TdAFpd1N4AWlLU"
    "3wBaRNTgAFpb1OEAWkjU4gBajtTjAFo+1OQAWk3U5QBaOdTmAFpM1OcAWnDU6ABaadTpAFpH1OoA"
    "WlHU6wBaVtTsAFpC1O0AWlzU7gBbctTvAFtu1PAAW8HU8QBbwNTyAFxZ1PMAXR7U9ABdC9T1AF0d"
    "1PYAXRrU9wBdINT4AF0M1PkAXSjU+gBdDdT7AF0m1PwAXSXU/QBdD9T+AF0w1UAAXRLVQQBdI9VC"
    "AF0f1UMAXS7VRABePtVFAF401UYAXrHVRwBetNVIAF651UkAXrLVSgBes9VLAF821UwAXzjVTQBf"
    "m9VOAF+W1U8AX5/VUABgitVRAGCQ1VIAYIbVUwBgvtVUAGCw1VUAYLrVVgBg09VXAGDU1VgAYM/V"
    "WQBg5NVaAGDZ1VsAYN3VXABgyNVdAGCx1V4AYNvVXwBgt9VgAGDK1WEAYL/VYgBgw9VjAGDN1WQA"
    "YMDVZQBjMtVmAGNl1WcAY4rVaABjgtVpAGN91WoAY73VawBjntVsAGOt1W0AY53VbgBjl9VvAGOr"
    "1XAAY47VcQBjb9VyAGOH1XMAY5DVdABjbtV1AGOv1XYAY3XVdwBjnNV4AGNt1XkAY67VegBjfNV7"
    "AGOk1XwAYzvVfQBjn9V+AGN41aEAY4XVogBjgdWjAGOR1aQAY43VpQBjcNWmAGVT1acAZc3VqABm"
    "ZdWpAGZh1aoAZlvVqwBmWdWsAGZc1a0AZmLVrgBnGNWvAGh51bAAaIfVsQBokNWyAGic1bMAaG3V"
    "tABobtW1AGiu1bYAaKvVtwBpVtW4AGhv1bkAaKPVugBorNW7AGip1bwAaHXVvQBodNW+AGiy1b8A"
    "aI/VwABod9XBAGiS1cIAaHzVwwBoa9XEAGhy1cUAaKrVxgBogNXHAGhx1cgAaH7VyQBom9XKAGiW"
    "1csAaIvVzABooNXNAGiJ1c4AaKTVzwBoeNXQAGh71dEAaJHV0gBojNXTAGiK1dQAaH3V1QBrNtXW"
    "AGsz1dcAazfV2ABrONXZAGuR1doAa4/V2wBrjdXcAGuO1d0Aa4zV3gBsKtXfAG3A1eAAbavV4QBt"
    "tNXiAG2z1eMAbnTV5ABtrNXlAG3p1eYAbeLV5wBtt9XoAG321ekAbdTV6gBuANXrAG3I1ewAbeDV"
    "7QBt39XuAG3W1e8Abb7V8ABt5dXxAG3c1fIAbd3V8wBt29X0AG301fUAbcrV9gBtvdX3AG3t1fgA"
    "bfDV+QBtutX6AG3V1fsAbcLV/ABtz9X9AG3J1f4AbdDWQABt8tZBAG3T1kIAbf3WQwBt19ZEAG3N"
    "1kUAbePWRgBtu9ZHAHD61kgAcQ3WSQBw99ZKAHEX1ksAcPTWTABxDNZNAHDw1k4AcQTWTwBw89ZQ"
    "AHEQ1lEAcPzWUgBw/9ZTAHEG1lQAcRPWVQBxANZWAHD41lcAcPbWWABxC9ZZAHEC1loAcQ7WWwBy"
    "ftZcAHJ71l0AcnzWXgByf9ZfAHMd1mAAcxfWYQBzB9ZiAHMR1mMAcxjWZABzCtZlAHMI1mYAcv/W"
    "ZwBzD9ZoAHMe1mkAc4jWagBz9tZrAHP41mwAc/XWbQB0BNZuAHQB1m8Ac/3WcAB0B9ZxAHQA1nIA"
    "c/rWcwBz/NZ0AHP/1nUAdAzWdgB0C9Z3AHP01ngAdAjWeQB1ZNZ6AHVj1nsAdc7WfAB10tZ9AHXP"
    "1n4AdcvWoQB1zNaiAHXR1qMAddDWpAB2j9alAHaJ1qYAdtPWpwB3OdaoAHcv1qkAdy3WqgB3Mdar"
    "AHcy1qwAdzTWrQB3M9auAHc91q8AdyXWsAB3O9axAHc11rIAeEjWswB4Uta0AHhJ1rUAeE3WtgB4"
    "Sta3AHhM1rgAeCbWuQB4Rda6AHhQ1rsAeWTWvAB5Z9a9AHlp1r4AeWrWvwB5Y9bAAHlr1sEAeWHW"
    "wgB5u9bDAHn61sQAefjWxQB59tbGAHn31scAeo/WyAB6lNbJAHqQ1soAezXWywB7R9bMAHs01s0A"
    "eyXWzgB7MNbPAHsi1tAAeyTW0QB7M9bSAHsY1tMAeyrW1AB7HdbVAHsx1tYAeyvW1wB7LdbYAHsv"
    "1tkAezLW2gB7ONbbAHsa1twAeyPW3QB8lNbeAHyY1t8AfJbW4AB8o9bhAH011uIAfT3W4wB9ONbk"
    "AH021uUAfTrW5gB9RdbnAH0s1ugAfSnW6QB9QdbqAH1H1usAfT7W7AB9P9btAH1K1u4AfTvW7wB9"
    "KNbwAH9j1vEAf5XW8gB/nNbzAH+d1vQAf5vW9QB/ytb2AH/L1vcAf83W+AB/0Nb5AH/R1voAf8fW"
    "+wB/z9b8AH/J1v0AgB/W/gCAHtdAAIAb10EAgEfXQgCAQ9dDAIBI10QAgRjXRQCBJddGAIEZ10cA"
    "gRvXSACBLddJAIEf10oAgSzXSwCBHtdMAIEh100AgRXXTgCBJ9dPAIEd11AAgSLXUQCCEddSAII4"
    "11MAgjPXVACCOtdVAII011YAgjLXVwCCdNdYAIOQ11kAg6PXWgCDqNdbAION11wAg3rXXQCDc9de"
    "AIOk118Ag3TXYACDj9dhAIOB12IAg5XXYwCDmddkAIN112UAg5TXZgCDqddnAIN912gAg4PXaQCD"
    "jNdqAIOd12sAg5vXbACDqtdtAIOL124Ag37XbwCDpddwAIOv13EAg4jXcgCDl9dzAIOw13QAg3/X"
    "dQCDptd2AIOH13cAg67XeACDdtd5AIOa13oAhlnXewCGVtd8AIa/130AhrfXfgCGwtehAIbB16IA"
    "hsXXowCGutekAIaw16UAhsjXpgCGudenAIaz16gAhrjXqQCGzNeqAIa016sAhrvXrACGvNetAIbD"
    "164Ahr3XrwCGvtewAIhS17EAiInXsgCIldezAIio17QAiKLXtQCIqte2AIia17cAiJHXuACIode5"
    "AIif17oAiJjXuwCIp9e8AIiZ170AiJvXvgCIl9e/AIik18AAiKzXwQCIjNfCAIiT18MAiI7XxACJ"
    "gtfFAInW18YAidnXxwCJ1dfIAIow18kAiifXygCKLNfLAIoe18wAjDnXzQCMO9fOAIxc188AjF3X"
    "0ACMfdfRAIyl19IAjX3X0wCNe9fUAI1519UAjbzX1gCNwtfXAI2519gAjb/X2QCNwdfaAI7Y19sA"
    "jt7X3ACO3dfdAI7c194AjtfX3wCO4NfgAI7h1+EAkCTX4gCQC9fjAJAR1+QAkBzX5QCQDNfmAJAh"
    "1+cAkO/X6ACQ6tfpAJDw1+oAkPTX6wCQ8tfsAJDz1+0AkNTX7gCQ69fvAJDs1/AAkOnX8QCRVtfy"
    "AJFY1/MAkVrX9ACRU9f1AJFV1/YAkezX9wCR9Nf4AJHx1/kAkfPX+gCR+Nf7AJHk1/wAkfnX/QCR"
    "6tf+AJHr2EAAkffYQQCR6NhCAJHu2EMAlXrYRACVhthFAJWI2EYAlnzYRwCWbdhIAJZr2EkAlnHY"
    "SgCWb9hLAJa/2EwAl2rYTQCYBNhOAJjl2E8AmZfYUABQm9hRAFCV2FIAUJTYUwBQnthUAFCL2FUA"
    "UKPYVgBQg9hXAFCM2FgAUI7YWQBQndhaAFBo2FsAUJzYXABQkthdAFCC2F4AUIfYXwBRX9hgAFHU"
    "2GEAUxLYYgBTEdhjAFOk2GQAU6fYZQBVkdhmAFWo2GcAVaXYaABVrdhpAFV32GoAVkXYawBVoths"
    "AFWT2G0AVYjYbgBVj9hvAFW12HAAVYHYcQBVo9hyAFWS2HMAVaTYdABVfdh1AFWM2HYAVabYdwBV"
    "f9h4AFWV2HkAVaHYegBVjth7AFcM2HwAWCnYfQBYN9h+AFgZ2KEAWB7YogBYJ9ijAFgj2KQAWCjY"
    "pQBX9dimAFhI2KcAWCXYqABYHNipAFgb2KoAWDPYqwBYP9isAFg22K0AWC7YrgBYOdivAFg42LAA"
    "WC3YsQBYLNiyAFg72LMAWWHYtABar9i1AFqU2LYAWp/YtwBaeti4AFqi2LkAWp7YugBaeNi7AFqm"
    "2LwAWnzYvQBapdi+AFqs2L8AWpXYwABartjBAFo32MIAWoTYwwBaitjEAFqX2MUAWoPYxgBai9jH"
    "AFqp2MgAWnvYyQBafdjKAFqM2MsAWpzYzABaj9jNAFqT2M4AWp3YzwBb6tjQAFvN2NEAW8vY0gBb"
    "1NjTAFvR2NQAW8rY1QBbztjWAFwM2NcAXDDY2ABdN9jZAF1D2NoAXWvY2wBdQdjcAF1L2N0AXT/Y"
    "3gBdNdjfAF1R2OAAXU7Y4QBdVdjiAF0z2OMAXTrY5ABdUtjlAF092OYAXTHY5wBdWdjoAF1C2OkA"
    "XTnY6gBdSdjrAF042OwAXTzY7QBdMtjuAF022O8AXUDY8ABdRdjxAF5E2PIAXkHY8wBfWNj0AF+m"
    "2PUAX6XY9gBfq9j3AGDJ2PgAYLnY+QBgzNj6AGDi2PsAYM7Y/ABgxNj9AGEU2P4AYPLZQABhCtlB"
    "AGEW2UIAYQXZQwBg9dlEAGET2UUAYPjZRgBg/NlHAGD+2UgAYMHZSQBhA9lKAGEY2UsAYR3ZTABh"
    "ENlNAGD/2U4AYQTZTwBhC9lQAGJK2VEAY5TZUgBjsdlTAGOw2VQAY87ZVQBj5dlWAGPo2VcAY+/Z"
    "WABjw9lZAGSd2VoAY/PZWwBjytlcAGPg2V0AY/bZXgBj1dlfAGPy2WAAY/XZYQBkYdliAGPf2WMA"
    "Y77ZZABj3dllAGPc2WYAY8TZZwBj2NloAGPT2WkAY8LZagBjx9lrAGPM2WwAY8vZbQBjyNluAGPw"
    "2W8AY9fZcABj2dlxAGUy2XIAZWfZcwBlatl0AGVk2XUAZVzZdgBlaNl3AGVl2XgAZYzZeQBlndl6"
    "AGWe2XsAZa7ZfABl0Nl9AGXS2X4AZnzZoQBmbNmiAGZ72aMAZoDZpABmcdmlAGZ52aYAZmrZpwBm"
    "ctmoAGcB2akAaQzZqgBo09mrAGkE2awAaNzZrQBpKtmuAGjs2a8AaOrZsABo8dmxAGkP2bIAaNbZ"
    "swBo99m0AGjr2bUAaOTZtgBo9tm3AGkT2bgAaRDZuQBo89m6AGjh2bsAaQfZvABozNm9AGkI2b4A"
    "aXDZvwBotNnAAGkR2cEAaO/ZwgBoxtnDAGkU2cQAaPjZxQBo0NnGAGj92ccAaPzZyABo6NnJAGkL"
    "2coAaQrZywBpF9nMAGjO2c0AaMjZzgBo3dnPAGje2dAAaObZ0QBo9NnSAGjR2dMAaQbZ1ABo1NnV"
    "AGjp2dYAaRXZ1wBpJdnYAGjH2dkAaznZ2gBrO9nbAGs/2dwAazzZ3QBrlNneAGuX2d8Aa5nZ4ABr"
    "ldnhAGu92eIAa/DZ4wBr8tnkAGvz2eUAbDDZ5gBt/NnnAG5G2egAbkfZ6QBuH9nqAG5J2esAbojZ"
    "7ABuPNntAG492e4AbkXZ7wBuYtnwAG4r2fEAbj/Z8gBuQdnzAG5d2fQAbnPZ9QBuHNn2AG4z2fcA"
    "bkvZ+ABuQNn5AG5R2foAbjvZ+wBuA9n8AG4u2f0Abl7Z/gBuaNpAAG5c2kEAbmHaQgBuMdpDAG4o"
    "2kQAbmDaRQBucdpGAG5r2kcAbjnaSABuItpJAG4w2koAblPaSwBuZdpMAG4n2k0AbnjaTgBuZNpP"
    "AG532lAAblXaUQBuedpSAG5S2lMAbmbaVABuNdpVAG422lYAblraVwBxINpYAHEe2lkAcS/aWgBw"
    "+9pbAHEu2lwAcTHaXQBxI9peAHEl2l8AcSLaYABxMtphAHEf2mIAcSjaYwBxOtpkAHEb2mUAckva"
    "ZgByWtpnAHKI2mgAconaaQByhtpqAHKF2msAcovabABzEtptAHML2m4AczDabwBzItpwAHMx2nEA"
    "czPacgBzJ9pzAHMy2nQAcy3adQBzJtp2AHMj2ncAczXaeABzDNp5AHQu2noAdCzaewB0MNp8AHQr"
    "2n0AdBbafgB0GtqhAHQh2qIAdC3aowB0MdqkAHQk2qUAdCPapgB0HdqnAHQp2qgAdCDaqQB0Mtqq"
    "AHT72qsAdS/arAB1b9qtAHVs2q4AdefarwB12tqwAHXh2rEAdebasgB13dqzAHXf2rQAdeTatQB1"
    "19q2AHaV2rcAdpLauAB22tq5AHdG2roAd0fauwB3RNq8AHdN2r0Ad0XavgB3Stq/AHdO2sAAd0va"
    "wQB3TNrCAHfe2sMAd+zaxAB4YNrFAHhk2sYAeGXaxwB4XNrIAHht2skAeHHaygB4atrLAHhu2swA"
    "eHDazQB4adrOAHho2s8AeF7a0AB4YtrRAHl02tIAeXPa0wB5ctrUAHlw2tUAegLa1gB6CtrXAHoD"
    "2tgAegza2QB6BNraAHqZ2tsAeuba3AB65NrdAHtK2t4Aezva3wB7RNrgAHtI2uEAe0za4gB7Ttrj"
    "AHtA2uQAe1ja5QB7RdrmAHyi2ucAfJ7a6AB8qNrpAHyh2uoAfVja6wB9b9rsAH1j2u0AfVPa7gB9"
    "VtrvAH1n2vAAfWra8QB9T9ryAH1t2vMAfVza9AB9a9r1AH1S2vYAfVTa9wB9adr4AH1R2vkAfV/a"
    "+gB9Ttr7AH8+2vwAfz/a/QB/Zdr+AH9m20AAf6LbQQB/oNtCAH+h20MAf9fbRACAUdtFAIBP20YA"
    "gFDbRwCA/ttIAIDU20kAgUPbSgCBSttLAIFS20wAgU/bTQCBR9tOAIE9208AgU3bUACBOttRAIHm"
    "21IAge7bUwCB99tUAIH421UAgfnbVgCCBNtXAII821gAgj3bWQCCP9taAIJ121sAgzvbXACDz9td"
    "AIP5214AhCPbXwCDwNtgAIPo22EAhBLbYgCD59tjAIPk22QAg/zbZQCD9ttmAIQQ22cAg8bbaACD"
    "yNtpAIPr22oAg+PbawCDv9tsAIQB220Ag93bbgCD5dtvAIPY23AAg//bcQCD4dtyAIPL23MAg87b"
    "dACD1tt1AIP123YAg8nbdwCECdt4AIQP23kAg97begCEEdt7AIQG23wAg8LbfQCD89t+AIPV26EA"
    "g/rbogCDx9ujAIPR26QAg+rbpQCEE9umAIPD26cAg+zbqACD7tupAIPE26oAg/vbqwCD19usAIPi"
    "260AhBvbrgCD29uvAIP+27AAhtjbsQCG4tuyAIbm27MAhtPbtACG49u1AIba27YAhurbtwCG3du4"
    "AIbr27kAhtzbugCG7Nu7AIbp27wAhtfbvQCG6Nu+AIbR278AiEjbwACIVtvBAIhV28IAiLrbwwCI"
    "19vEAIi528UAiLjbxgCIwNvHAIi+28gAiLbbyQCIvNvKAIi328sAiL3bzACIstvNAIkB284AiMnb"
    "zwCJldvQAImY29EAiZfb0gCJ3dvTAIna29QAidvb1QCKTtvWAIpN29cAijnb2ACKWdvZAIpA29oA"
    "ilfb2wCKWNvcAIpE290AikXb3gCKUtvfAIpI2+AAilHb4QCKStviAIpM2+MAik/b5ACMX9vlAIyB"
    "2+YAjIDb5wCMutvoAIy+2+kAjLDb6gCMudvrAIy12+wAjYTb7QCNgNvuAI2J2+8Ajdjb8ACN09vx"
    "AI3N2/IAjcfb8wCN1tv0AI3c2/UAjc/b9gCN1dv3AI3Z2/gAjcjb+QCN19v6AI3F2/sAju/b/ACO"
    "99v9AI762/4AjvncQACO5txBAI7u3EIAjuXcQwCO9dxEAI7n3EUAjujcRgCO9txHAI7r3EgAjvHc"
    "SQCO7NxKAI703EsAjuncTACQLdxNAJA03E4AkC/cTwCRBtxQAJEs3FEAkQTcUgCQ/9xTAJD83FQA"
    "kQjcVQCQ+dxWAJD73FcAkQHcWACRANxZAJEH3FoAkQXcWwCRA9xcAJFh3F0AkWTcXgCRX9xfAJFi"
    "3GAAkWDcYQCSAdxiAJIK3GMAkiXcZACSA9xlAJIa3GYAkibcZwCSD9xoAJIM3GkAkgDcagCSEtxr"
    "AJH/3GwAkf3cbQCSBtxuAJIE3G8AkifccACSAtxxAJIc3HIAkiTccwCSGdx0AJIX3HUAkgXcdgCS"
    "Ftx3AJV73HgAlY3ceQCVjNx6AJWQ3HsAlofcfACWftx9AJaI3H4AloncoQCWg9yiAJaA3KMAlsLc"
    "pACWyNylAJbD3KYAlvHcpwCW8NyoAJds3KkAl3DcqgCXbtyrAJgH3KwAmKncrQCY69yuAJzm3K8A"
    "nvncsABOg9yxAE6E3LIATrbcswBQvdy0AFC/3LUAUMbctgBQrty3AFDE3LgAUMrcuQBQtNy6AFDI"
    "3LsAUMLcvABQsNy9AFDB3L4AULrcvwBQsdzAAFDL3MEAUMncwgBQttzDAFC43MQAUdfcxQBSetzG"
    "AFJ43McAUnvcyABSfNzJAFXD3MoAVdvcywBVzNzMAFXQ3M0AVcvczgBVytzPAFXd3NAAVcDc0QBV"
    "1NzSAFXE3NMAVenc1ABVv9zVAFXS3NYAVY3c1wBVz9zYAFXV3NkAVeLc2gBV1tzbAFXI3NwAVfLc"
    "3QBVzdzeAFXZ3N8AVcLc4ABXFNzhAFhT3OIAWGjc4wBYZNzkAFhP3OUAWE3c5gBYSdznAFhv3OgA"
    "WFXc6QBYTtzqAFhd3OsAWFnc7ABYZdztAFhb3O4AWD3c7wBYY9zwAFhx3PEAWPzc8gBax9zzAFrE"
    "3PQAWsvc9QBautz2AFq43PcAWrHc+ABatdz5AFqw3PoAWr/c+wBayNz8AFq73P0AWsbc/gBat91A"
    "AFrA3UEAWsrdQgBatN1DAFq23UQAWs3dRQBaud1GAFqQ3UcAW9bdSABb2N1JAFvZ3UoAXB/dSwBc"
    "M91MAF1x3U0AXWPdTgBdSt1PAF1l3VAAXXLdUQBdbN1SAF1e3VMAXWjdVABdZ91VAF1i3VYAXfDd"
    "VwBeT91YAF5O3VkAXkrdWgBeTd1bAF5L3VwAXsXdXQBezN1eAF7G3V8AXsvdYABex91hAF9A3WIA"
    "X6/dYwBfrd1kAGD33WUAYUndZgBhSt1nAGEr3WgAYUXdaQBhNt1qAGEy3WsAYS7dbABhRt1tAGEv"
    "3W4AYU/dbwBhKd1wAGFA3XEAYiDdcgCRaN1zAGIj3XQAYiXddQBiJN12AGPF3XcAY/HdeABj6915"
    "AGQQ3XoAZBLdewBkCd18AGQg3X0AZCTdfgBkM92hAGRD3aIAZB/dowBkFd2kAGQY3aUAZDndpgBk"
    "N92nAGQi3agAZCPdqQBkDN2qAGQm3asAZDDdrABkKN2tAGRB3a4AZDXdrwBkL92wAGQK3bEAZBrd"
    "sgBkQN2zAGQl3bQAZCfdtQBkC922AGPn3bcAZBvduABkLt25AGQh3boAZA7duwBlb928AGWS3b0A"
    "ZdPdvgBmht2/AGaM3cAAZpXdwQBmkN3CAGaL3cMAZordxABmmd3FAGaU3cYAZnjdxwBnIN3IAGlm"
    "3ckAaV/dygBpON3LAGlO3cwAaWLdzQBpcd3OAGk/3c8AaUXd0ABpat3RAGk53dIAaULd0wBpV93U"
    "AGlZ3dUAaXrd1gBpSN3XAGlJ3dgAaTXd2QBpbN3aAGkz3dsAaT3d3ABpZd3dAGjw3d4AaXjd3wBp"
    "NN3gAGlp3eEAaUDd4gBpb93jAGlE3eQAaXbd5QBpWN3mAGlB3ecAaXTd6ABpTN3pAGk73eoAaUvd"
    "6wBpN93sAGlc3e0AaU/d7gBpUd3vAGky3fAAaVLd8QBpL93yAGl73fMAaTzd9ABrRt31AGtF3fYA"
    "a0Pd9wBrQt34AGtI3fkAa0Hd+gBrm937APoN3fwAa/vd/QBr/N3+AGv53kAAa/feQQBr+N5CAG6b"
    "3kMAbtbeRABuyN5FAG6P3kYAbsDeRwBun95IAG6T3kkAbpTeSgBuoN5LAG6x3kwAbrneTQBuxt5O"
    "AG7S3k8Abr3eUABuwd5RAG6e3lIAbsneUwBut95UAG6w3lUAbs3eVgBupt5XAG7P3lgAbrLeWQBu"
    "vt5aAG7D3lsAbtzeXABu2N5dAG6Z3l4AbpLeXwBujt5gAG6N3mEAbqTeYgBuod5jAG6/3mQAbrPe"
    "ZQBu0N5mAG7K3mcAbpfeaABurt5pAG6j3moAcUfeawBxVN5sAHFS3m0AcWPebgBxYN5vAHFB3nAA"
    "cV3ecQBxYt5yAHFy3nMAcXjedABxat51AHFh3nYAcULedwBxWN54AHFD3nkAcUveegBxcN57AHFf"
    "3nwAcVDefQBxU95+AHFE3qEAcU3eogBxWt6jAHJP3qQAco3epQByjN6mAHKR3qcAcpDeqAByjt6p"
    "AHM83qoAc0LeqwBzO96sAHM63q0Ac0DergBzSt6vAHNJ3rAAdETesQB0St6yAHRL3rMAdFLetAB0"
    "Ud61AHRX3rYAdEDetwB0T964AHRQ3rkAdE7eugB0Qt67AHRG3rwAdE3evQB0VN6+AHTh3r8AdP/e"
    "wAB0/t7BAHT93sIAdR3ewwB1ed7EAHV33sUAaYPexgB1797HAHYP3sgAdgPeyQB1997KAHX+3ssA"
    "dfzezAB1+d7NAHX43s4AdhDezwB1+97QAHX23tEAde3e0gB19d7TAHX93tQAdpne1QB2td7WAHbd"
    "3tcAd1Xe2AB3X97ZAHdg3toAd1Le2wB3Vt7cAHda3t0Ad2ne3gB3Z97fAHdU3uAAd1ne4QB3bd7i"
    "AHfg3uMAeIfe5AB4mt7lAHiU3uYAeI/e5wB4hN7oAHiV3ukAeIXe6gB4ht7rAHih3uwAeIPe7QB4"
    "ed7uAHiZ3u8AeIDe8AB4lt7xAHh73vIAeXze8wB5gt70AHl93vUAeXne9gB6Ed73AHoY3vgAehne"
    "+QB6Et76AHoX3vsAehXe/AB6It79AHoT3v4AehvfQAB6EN9BAHqj30IAeqLfQwB6nt9EAHrr30UA"
    "e2bfRgB7ZN9HAHtt30gAe3TfSQB7ad9KAHty30sAe2XfTAB7c99NAHtx304Ae3DfTwB7Yd9QAHt4"
    "31EAe3bfUgB7Y99TAHyy31QAfLTfVQB8r99WAH2I31cAfYbfWAB9gN9ZAH2N31oAfX/fWwB9hd9c"
    "AH16310AfY7fXgB9e99fAH2D32AAfXzfYQB9jN9iAH2U32MAfYTfZAB9fd9lAH2S32YAf23fZwB/"
    "a99oAH9n32kAf2jfagB/bN9rAH+m32wAf6XfbQB/p99uAH/b328Af9zfcACAId9xAIFk33IAgWDf"
    "cwCBd990AIFc33UAgWnfdgCBW993AIFi33gAgXLfeQBnId96AIFe33sAgXbffACBZ999AIFv334A"
    "gUTfoQCBYd+iAIId36MAgknfpACCRN+lAIJA36YAgkLfpwCCRd+oAITx36kAhD/fqgCEVt+rAIR2"
    "36wAhHnfrQCEj9+uAISN368AhGXfsACEUd+xAIRA37IAhIbfswCEZ9+0AIQw37UAhE3ftgCEfd+3"
    "AIRa37gAhFnfuQCEdN+6AIRz37sAhF3fvACFB9+9AIRe374AhDffvwCEOt/AAIQ038EAhHrfwgCE"
    "Q9/DAIR438QAhDLfxQCERd/GAIQp38cAg9nfyACES9/JAIQv38oAhELfywCELd/MAIRf380AhHDf"
    "zgCEOd/PAIRO39AAhEzf0QCEUt/SAIRv39MAhMXf1ACEjt/VAIQ739YAhEff1wCENt/YAIQz39kA"
    "hGjf2gCEft/bAIRE39wAhCvf3QCEYN/eAIRU398AhG7f4ACEUN/hAIcL3+IAhwTf4wCG99/kAIcM"
    "3+UAhvrf5gCG1t/nAIb13+gAh03f6QCG+N/qAIcO3+sAhwnf7ACHAd/tAIb23+4Ahw3f7wCHBd/w"
    "AIjW3/EAiMvf8gCIzd/zAIjO3/QAiN7f9QCI29/2AIja3/cAiMzf+ACI0N/5AImF3/oAiZvf+wCJ"
    "39/8AInl3/0AieTf/gCJ4eBAAIng4EEAieLgQgCJ3OBDAInm4EQAinbgRQCKhuBGAIp/4EcAimHg"
    "SACKP+BJAIp34EoAioLgSwCKhOBMAIp14E0AioPgTgCKgeBPAIp04FAAinrgUQCMPOBSAIxL4FMA"
    "jErgVACMZeBVAIxk4FYAjGbgVwCMhuBYAIyE4FkAjIXgWgCMzOBbAI1o4FwAjWngXQCNkeBeAI2M"
    "4F8AjY7gYACNj+BhAI2N4GIAjZPgYwCNlOBkAI2Q4GUAjZLgZgCN8OBnAI3g4GgAjezgaQCN8eBq"
    "AI3u4GsAjdDgbACN6eBtAI3j4G4AjeLgbwCN5+BwAI3y4HEAjevgcgCN9OBzAI8G4HQAjv/gdQCP"
    "AeB2AI8A4HcAjwXgeACPB+B5AI8I4HoAjwLgewCPC+B8AJBS4H0AkD/gfgCQROChAJBJ4KIAkD3g"
    "owCREOCkAJEN4KUAkQ/gpgCREeCnAJEW4KgAkRTgqQCRC+CqAJEO4KsAkW7grACRb+CtAJJI4K4A"
    "klLgrwCSMOCwAJI64LEAkmbgsgCSM+CzAJJl4LQAkl7gtQCSg+C2AJIu4LcAkkrguACSRuC5AJJt"
    "4LoAkmzguwCST+C8AJJg4L0AkmfgvgCSb+C/AJI24MAAkmHgwQCScODCAJIx4MMAklTgxACSY+DF"
    "AJJQ4MYAknLgxwCSTuDIAJJT4MkAkkzgygCSVuDLAJIy4MwAlZ/gzQCVnODOAJWe4M8AlZvg0ACW"
    "kuDRAJaT4NIAlpHg0wCWl+DUAJbO4NUAlvrg1gCW/eDXAJb44NgAlvXg2QCXc+DaAJd34NsAl3jg"
    "3ACXcuDdAJgP4N4AmA3g3wCYDuDgAJis4OEAmPbg4gCY+eDjAJmv4OQAmbLg5QCZsODmAJm14OcA"
    "mq3g6ACaq+DpAJtb4OoAnOrg6wCc7eDsAJzn4O0AnoDg7gCe/eDvAFDm4PAAUNTg8QBQ1+DyAFDo"
    "4PMAUPPg9ABQ2+D1AFDq4PYAUN3g9wBQ5OD4AFDT4PkAUOzg+gBQ8OD7AFDv4PwAUOPg/QBQ4OD+"
    "AFHY4UAAUoDhQQBSgeFCAFLp4UMAUuvhRABTMOFFAFOs4UYAVifhRwBWFeFIAFYM4UkAVhLhSgBV"
    "/OFLAFYP4UwAVhzhTQBWAeFOAFYT4U8AVgLhUABV+uFRAFYd4VIAVgThUwBV/+FUAFX54VUAWInh"
    "VgBYfOFXAFiQ4VgAWJjhWQBYhuFaAFiB4VsAWH/hXABYdOFdAFiL4V4AWHrhXwBYh+FgAFiR4WEA"
    "WI7hYgBYduFjAFiC4WQAWIjhZQBYe+FmAFiU4WcAWI/haABY/uFpAFlr4WoAWtzhawBa7uFsAFrl"
    "4W0AWtXhbgBa6uFvAFra4XAAWu3hcQBa6+FyAFrz4XMAWuLhdABa4OF1AFrb4XYAWuzhdwBa3uF4"
    "AFrd4XkAWtnhegBa6OF7AFrf4XwAW3fhfQBb4OF+AFvj4aEAXGPhogBdguGjAF2A4aQAXX3hpQBd"
    "huGmAF164acAXYHhqABdd+GpAF2K4aoAXYnhqwBdiOGsAF1+4a0AXXzhrgBdjeGvAF154bAAXX/h"
    "sQBeWOGyAF5Z4bMAXlPhtABe2OG1AF7R4bYAXtfhtwBezuG4AF7c4bkAXtXhugBe2eG7AF7S4bwA"
    "XtThvQBfROG+AF9D4b8AX2/hwABftuHBAGEs4cIAYSjhwwBhQeHEAGFe4cUAYXHhxgBhc+HHAGFS"
    "4cgAYVPhyQBhcuHKAGFs4csAYYDhzABhdOHNAGFU4c4AYXrhzwBhW+HQAGFl4dEAYTvh0gBhauHT"
    "AGFh4dQAYVbh1QBiKeHWAGIn4dcAYivh2ABkK+HZAGRN4doAZFvh2wBkXeHcAGR04d0AZHbh3gBk"
    "cuHfAGRz4eAAZH3h4QBkdeHiAGRm4eMAZKbh5ABkTuHlAGSC4eYAZF7h5wBkXOHoAGRL4ekAZFPh"
    "6gBkYOHrAGRQ4ewAZH/h7QBkP+HuAGRs4e8AZGvh8ABkWeHxAGRl4fIAZHfh8wBlc+H0AGWg4fUA"
    "ZqHh9gBmoOH3AGaf4fgAZwXh+QBnBOH6AGci4fsAabHh/ABptuH9AGnJ4f4AaaDiQABpzuJBAGmW"
    "4kIAabDiQwBprOJEAGm84kUAaZHiRgBpmeJHAGmO4kgAaafiSQBpjeJKAGmp4ksAab7iTABpr+JN"
    "AGm/4k4AacTiTwBpveJQAGmk4lEAadTiUgBpueJTAGnK4lQAaZriVQBpz+JWAGmz4lcAaZPiWABp"
    "quJZAGmh4loAaZ7iWwBp2eJcAGmX4l0AaZDiXgBpwuJfAGm14mAAaaXiYQBpxuJiAGtK4mMAa03i"
    "ZABrS+JlAGue4mYAa5/iZwBroOJoAGvD4mkAa8TiagBr/uJrAG7O4mwAbvXibQBu8eJuAG8D4m8A"
    "byXicABu+OJxAG834nIAbvvicwBvLuJ0AG8J4nUAb07idgBvGeJ3AG8a4ngAbyfieQBvGOJ6AG87"
    "4nsAbxLifABu7eJ9AG8K4n4AbzbioQBvc+KiAG754qMAbu7ipABvLeKlAG9A4qYAbzDipwBvPOKo"
    "AG814qkAbuviqgBvB+KrAG8O4qwAb0PirQBvBeKuAG794q8AbvbisABvOeKxAG8c4rIAbvziswBv"
    "OuK0AG8f4rUAbw3itgBvHuK3AG8I4rgAbyHiuQBxh+K6AHGQ4rsAcYnivABxgOK9AHGF4r4AcYLi"
    "vwBxj+LAAHF74sEAcYbiwgBxgeLDAHGX4sQAckTixQByU+LGAHKX4scAcpXiyAByk+LJAHND4soA"
    "c03iywBzUeLMAHNM4s0AdGLizgB0c+LPAHRx4tAAdHXi0QB0cuLSAHRn4tMAdG7i1AB1AOLVAHUC"
    "4tYAdQPi1wB1feLYAHWQ4tkAdhbi2gB2COLbAHYM4twAdhXi3QB2EeLeAHYK4t8AdhTi4AB2uOLh"
    "AHeB4uIAd3zi4wB3heLkAHeC4uUAd27i5gB3gOLnAHdv4ugAd37i6QB3g+LqAHiy4usAeKri7AB4"
    "tOLtAHit4u4AeKji7wB4fuLwAHir4vEAeJ7i8gB4peLzAHig4vQAeKzi9QB4ouL2AHik4vcAeZji"
    "+AB5iuL5AHmL4voAeZbi+wB5leL8AHmU4v0AeZPi/gB5l+NAAHmI40EAeZLjQgB5kONDAHor40QA"
    "ekrjRQB6MONGAHov40cAeijjSAB6JuNJAHqo40oAeqvjSwB6rONMAHru400Ae4jjTgB7nONPAHuK"
    "41AAe5HjUQB7kONSAHuW41MAe43jVAB7jONVAHub41YAe47jVwB7heNYAHuY41kAUoTjWgB7meNb"
    "AHuk41wAe4LjXQB8u+NeAHy/418AfLzjYAB8uuNhAH2n42IAfbfjYwB9wuNkAH2j42UAfarjZgB9"
    "weNnAH3A42gAfcXjaQB9neNqAH3O42sAfcTjbAB9xuNtAH3L424AfczjbwB9r+NwAH2543EAfZbj"
    "cgB9vONzAH2f43QAfabjdQB9ruN2AH2p43cAfaHjeAB9yeN5AH9z43oAf+LjewB/4+N8AH/l430A"
    "f97jfgCAJOOhAIBd46IAgFzjowCBieOkAIGG46UAgYPjpgCBh+OnAIGN46gAgYzjqQCBi+OqAIIV"
    "46sAhJfjrACEpOOtAISh464AhJ/jrwCEuuOwAITO47EAhMLjsgCErOOzAISu47QAhKvjtQCEueO2"
    "AIS047cAhMHjuACEzeO5AISq47oAhJrjuwCEseO8AITQ470AhJ3jvgCEp+O/AIS748AAhKLjwQCE"
    "lOPCAITH48MAhMzjxACEm+PFAISp48YAhK/jxwCEqOPIAITW48kAhJjjygCEtuPLAITP48wAhKDj"
    "zQCE1+POAITU488AhNLj0ACE2+PRAISw49IAhJHj0wCGYePUAIcz49UAhyPj1gCHKOPXAIdr49gA"
    "h0Dj2QCHLuPaAIce49sAhyHj3ACHGePdAIcb494Ah0Pj3wCHLOPgAIdB4+EAhz7j4gCHRuPjAIcg"
    "4+QAhzLj5QCHKuPmAIct4+cAhzzj6ACHEuPpAIc64+oAhzHj6wCHNePsAIdC4+0Ahybj7gCHJ+Pv"
    "AIc44/AAhyTj8QCHGuPyAIcw4/MAhxHj9ACI9+P1AIjn4/YAiPHj9wCI8uP4AIj64/kAiP7j+gCI"
    "7uP7AIj84/wAiPbj/QCI++P+AIjw5EAAiOzkQQCI6+RCAImd5EMAiaHkRACJn+RFAIme5EYAienk"
    "RwCJ6+RIAIno5EkAiqvkSgCKmeRLAIqL5EwAipLkTQCKj+ROAIqW5E8AjD3kUACMaORRAIxp5FIA"
    "jNXkUwCMz+RUAIzX5FUAjZbkVgCOCeRXAI4C5FgAjf/kWQCODeRaAI395FsAjgrkXACOA+RdAI4H"
    "5F4AjgbkXwCOBeRgAI3+5GEAjgDkYgCOBORjAI8Q5GQAjxHkZQCPDuRmAI8N5GcAkSPkaACRHORp"
    "AJEg5GoAkSLkawCRH+RsAJEd5G0AkRrkbgCRJORvAJEh5HAAkRvkcQCReuRyAJFy5HMAkXnkdACR"
    "c+R1AJKl5HYAkqTkdwCSduR4AJKb5HkAknrkegCSoOR7AJKU5HwAkqrkfQCSjeR+AJKm5KEAkprk"
    "ogCSq+SjAJJ55KQAkpfkpQCSf+SmAJKj5KcAku7kqACSjuSpAJKC5KoAkpXkqwCSouSsAJJ95K0A"
    "kojkrgCSoeSvAJKK5LAAkobksQCSjOSyAJKZ5LMAkqfktACSfuS1AJKH5LYAkqnktwCSneS4AJKL"
    "5LkAki3kugCWnuS7AJah5LwAlv/kvQCXWOS+AJd95L8Al3rkwACXfuTBAJeD5MIAl4DkwwCXguTE"
    "AJd75MUAl4TkxgCXgeTHAJd/5MgAl87kyQCXzeTKAJgW5MsAmK3kzACYruTNAJkC5M4AmQDkzwCZ"
    "B+TQAJmd5NEAmZzk0gCZw+TTAJm55NQAmbvk1QCZuuTWAJnC5NcAmb3k2ACZx+TZAJqx5NoAmuPk"
    "2wCa5+TcAJs+5N0Amz/k3gCbYOTfAJth5OAAm1/k4QCc8eTiAJzy5OMAnPXk5ACep+TlAFD/5OYA"
    "UQPk5wBRMOToAFD45OkAUQbk6gBRB+TrAFD25OwAUP7k7QBRC+TuAFEM5O8AUP3k8ABRCuTxAFKL"
    "5PIAUozk8wBS8eT0AFLv5PUAVkjk9gBWQuT3AFZM5PgAVjXk+QBWQeT6AFZK5PsAVknk/ABWRuT9"
    "AFZY5P4AVlrlQABWQOVBAFYz5UIAVj3lQwBWLOVEAFY+5UUAVjjlRgBWKuVHAFY65UgAVxrlSQBY"
    "q+VKAFid5UsAWLHlTABYoOVNAFij5U4AWK/lTwBYrOVQAFil5VEAWKHlUgBY/+VTAFr/5VQAWvTl"
    "VQBa/eVWAFr35VcAWvblWABbA+VZAFr45VoAWwLlWwBa+eVcAFsB5V0AWwflXgBbBeVfAFsP5WAA"
    "XGflYQBdmeViAF2X5WMAXZ/lZABdkuVlAF2i5WYAXZPlZwBdleVoAF2g5WkAXZzlagBdoeVrAF2a"
    "5WwAXZ7lbQBeaeVuAF5d5W8AXmDlcABeXOVxAH3z5XIAXtvlcwBe3uV0AF7h5XUAX0nldgBfsuV3"
    "AGGL5XgAYYPleQBheeV6AGGx5XsAYbDlfABhouV9AGGJ5X4AYZvloQBhk+WiAGGv5aMAYa3lpABh"
    "n+WlAGGS5aYAYarlpwBhoeWoAGGN5akAYWblqgBhs+WrAGIt5awAZG7lrQBkcOWuAGSW5a8AZKDl"
    "sABkheWxAGSX5bIAZJzlswBkj+W0AGSL5bUAZIrltgBkjOW3AGSj5bgAZJ/luQBkaOW6AGSx5bsA"
    "ZJjlvABlduW9AGV65b4AZXnlvwBle+XAAGWy5cEAZbPlwgBmteXDAGaw5cQAZqnlxQBmsuXGAGa3"
    "5ccAZqrlyABmr+XJAGoA5coAagblywBqF+XMAGnl5c0AafjlzgBqFeXPAGnx5dAAaeTl0QBqIOXS"
    "AGn/5dMAaezl1ABp4uXVAGob5dYAah3l1wBp/uXYAGon5dkAafLl2gBp7uXbAGoU5dwAaffl3QBp"
    "5+XeAGpA5d8Aagjl4ABp5uXhAGn75eIAag3l4wBp/OXkAGnr5eUAagnl5gBqBOXnAGoY5egAaiXl"
    "6QBqD+XqAGn25esAaibl7ABqB+XtAGn05e4Aahbl7wBrUeXwAGul5fEAa6Pl8gBrouXzAGum5fQA"
    "bAHl9QBsAOX2AGv/5fcAbALl+ABvQeX5AG8m5foAb37l+wBvh+X8AG/G5f0Ab5Ll/gBvjeZAAG+J"
    "5kEAb4zmQgBvYuZDAG9P5kQAb4XmRQBvWuZGAG+W5kcAb3bmSABvbOZJAG+C5koAb1XmSwBvcuZM"
    "AG9S5k0Ab1DmTgBvV+ZPAG+U5lAAb5PmUQBvXeZSAG8A5lMAb2HmVABva+ZVAG995lYAb2fmVwBv"
    "kOZYAG9T5lkAb4vmWgBvaeZbAG9/5lwAb5XmXQBvY+ZeAG935l8Ab2rmYABve+ZhAHGy5mIAca/m"
    "YwBxm+ZkAHGw5mUAcaDmZgBxmuZnAHGp5mgAcbXmaQBxneZqAHGl5msAcZ7mbABxpOZtAHGh5m4A"
    "carmbwBxnOZwAHGn5nEAcbPmcgBymOZzAHKa5nQAc1jmdQBzUuZ2AHNe5ncAc1/meABzYOZ5AHNd"
    "5noAc1vmewBzYeZ8AHNa5n0Ac1nmfgBzYuahAHSH5qIAdInmowB0iuakAHSG5qUAdIHmpgB0fean"
    "AHSF5qgAdIjmqQB0fOaqAHR55qsAdQjmrAB1B+atAHV+5q4AdiXmrwB2HuawAHYZ5rEAdh3msgB2"
    "HOazAHYj5rQAdhrmtQB2KOa2AHYb5rcAdpzmuAB2nea5AHae5roAdpvmuwB3jea8AHeP5r0Ad4nm"
    "vgB3iOa/AHjN5sAAeLvmwQB4z+bCAHjM5sMAeNHmxAB4zubFAHjU5sYAeMjmxwB4w+bIAHjE5skA"
    "eMnmygB5mubLAHmh5swAeaDmzQB5nObOAHmi5s8AeZvm0ABrdubRAHo55tIAerLm0wB6tObUAHqz"
    "5tUAe7fm1gB7y+bXAHu+5tgAe6zm2QB7zubaAHuv5tsAe7nm3AB7yubdAHu15t4AfMXm3wB8yObg"
    "AHzM5uEAfMvm4gB99+bjAH3b5uQAferm5QB95+bmAH3X5ucAfeHm6AB+A+bpAH365uoAfebm6wB9"
    "9ubsAH3x5u0AffDm7gB97ubvAH3f5vAAf3bm8QB/rObyAH+w5vMAf63m9AB/7eb1AH/r5vYAf+rm"
    "9wB/7Ob4AH/m5vkAf+jm+gCAZOb7AIBn5vwAgaPm/QCBn+b+AIGe50AAgZXnQQCBoudCAIGZ50MA"
    "gZfnRACCFudFAIJP50YAglPnRwCCUudIAIJQ50kAgk7nSgCCUedLAIUk50wAhTvnTQCFD+dOAIUA"
    "508AhSnnUACFDudRAIUJ51IAhQ3nUwCFH+dUAIUK51UAhSfnVgCFHOdXAIT751gAhSvnWQCE+uda"
    "AIUI51sAhQznXACE9OddAIUq514AhPLnXwCFFedgAIT352EAhOvnYgCE8+djAIT852QAhRLnZQCE"
    "6udmAITp52cAhRbnaACE/udpAIUo52oAhR3nawCFLudsAIUC520AhP3nbgCFHudvAIT253AAhTHn"
    "cQCFJudyAITn53MAhOjndACE8Od1AITv53YAhPnndwCFGOd4AIUg53kAhTDnegCFC+d7AIUZ53wA"
    "hS/nfQCGYud+AIdW56EAh2PnogCHZOejAId356QAh+HnpQCHc+emAIdY56cAh1TnqACHW+epAIdS"
    "56oAh2HnqwCHWuesAIdR560Ah17nrgCHbeevAIdq57AAh1DnsQCHTueyAIdf57MAh13ntACHb+e1"
    "AIds57YAh3rntwCHbue4AIdc57kAh2XnugCHT+e7AId757wAh3XnvQCHYue+AIdn578Ah2nnwACI"
    "WufBAIkF58IAiQznwwCJFOfEAIkL58UAiRfnxgCJGOfHAIkZ58gAiQbnyQCJFufKAIkR58sAiQ7n"
    "zACJCefNAImi584AiaTnzwCJo+fQAInt59EAifDn0gCJ7OfTAIrP59QAisbn1QCKuOfWAIrT59cA"
    "itHn2ACK1OfZAIrV59oAirvn2wCK1+fcAIq+590AisDn3gCKxeffAIrY5+AAisPn4QCKuufiAIq9"
    "5+MAitnn5ACMPuflAIxN5+YAjI/n5wCM5efoAIzf5+kAjNnn6gCM6OfrAIza5+wAjN3n7QCM5+fu"
    "AI2g5+8AjZzn8ACNoefxAI2b5/IAjiDn8wCOI+f0AI4l5/UAjiTn9gCOLuf3AI4V5/gAjhvn+QCO"
    "Fuf6AI4R5/sAjhnn/ACOJuf9AI4n5/4AjhToQACOEuhBAI4Y6EIAjhPoQwCOHOhEAI4X6EUAjhro"
    "RgCPLOhHAI8k6EgAjxjoSQCPGuhKAI8g6EsAjyPoTACPFuhNAI8X6E4AkHPoTwCQcOhQAJBv6FEA"
    "kGfoUgCQa+hTAJEv6FQAkSvoVQCRKehWAJEq6FcAkTLoWACRJuhZAJEu6FoAkYXoWwCRhuhcAJGK"
    "6F0AkYHoXgCRguhfAJGE6GAAkYDoYQCS0OhiAJLD6GMAksToZACSwOhlAJLZ6GYAkrboZwCSz+ho"
    "AJLx6GkAkt/oagCS2OhrAJLp6GwAktfobQCS3ehuAJLM6G8Aku/ocACSwuhxAJLo6HIAksrocwCS"
    "yOh0AJLO6HUAkubodgCSzeh3AJLV6HgAksnoeQCS4Oh6AJLe6HsAkufofACS0eh9AJLT6H4AkrXo"
    "oQCS4eiiAJLG6KMAkrTopACVfOilAJWs6KYAlavopwCVruioAJWw6KkAlqToqgCWouirAJbT6KwA"
    "lwXorQCXCOiuAJcC6K8Al1rosACXiuixAJeO6LIAl4joswCX0Oi0AJfP6LUAmB7otgCYHei3AJgm"
    "6LgAmCnouQCYKOi6AJgg6LsAmBvovACYJ+i9AJiy6L4AmQjovwCY+ujAAJkR6MEAmRTowgCZFujD"
    "AJkX6MQAmRXoxQCZ3OjGAJnN6McAmc/oyACZ0+jJAJnU6MoAmc7oywCZyejMAJnW6M0AmdjozgCZ"
    "y+jPAJnX6NAAmczo0QCas+jSAJrs6NMAmuvo1ACa8+jVAJry6NYAmvHo1wCbRujYAJtD6NkAm2fo"
    "2gCbdOjbAJtx6NwAm2bo3QCbdujeAJt16N8Am3Do4ACbaOjhAJtk6OIAm2zo4wCc/OjkAJz66OUA"
    "nP3o5gCc/+jnAJz36OgAnQfo6QCdAOjqAJz56OsAnPvo7ACdCOjtAJ0F6O4AnQTo7wCeg+jwAJ7T"
    "6PEAnw/o8gCfEOjzAFEc6PQAURPo9QBRF+j2AFEa6PcAURHo+ABR3uj5AFM06PoAU+Ho+wBWcOj8"
    "AFZg6P0AVm7o/gBWc+lAAFZm6UEAVmPpQgBWbelDAFZy6UQAVl7pRQBWd+lGAFcc6UcAVxvpSABY"
    "yOlJAFi96UoAWMnpSwBYv+lMAFi66U0AWMLpTgBYvOlPAFjG6VAAWxfpUQBbGelSAFsb6VMAWyHp"
    "VABbFOlVAFsT6VYAWxDpVwBbFulYAFso6VkAWxrpWgBbIOlbAFse6VwAW+/pXQBdrOleAF2x6V8A"
    "XanpYABdp+lhAF216WIAXbDpYwBdrulkAF2q6WUAXajpZgBdsulnAF2t6WgAXa/paQBdtOlqAF5n"
    "6WsAXmjpbABeZultAF5v6W4AXunpbwBe5+lwAF7m6XEAXujpcgBe5elzAF9L6XQAX7zpdQBhnel2"
    "AGGo6XcAYZbpeABhxel5AGG06XoAYcbpewBhwel8AGHM6X0AYbrpfgBhv+mhAGG46aIAYYzpowBk"
    "1+mkAGTW6aUAZNDppgBkz+mnAGTJ6agAZL3pqQBkiemqAGTD6asAZNvprABk8+mtAGTZ6a4AZTPp"
    "rwBlf+mwAGV86bEAZaLpsgBmyOmzAGa+6bQAZsDptQBmyum2AGbL6bcAZs/puABmvem5AGa76boA"
    "ZrrpuwBmzOm8AGcj6b0AajTpvgBqZum/AGpJ6cAAamfpwQBqMunCAGpo6cMAaj7pxABqXenFAGpt"
    "6cYAanbpxwBqW+nIAGpR6ckAaijpygBqWunLAGo76cwAaj/pzQBqQenOAGpq6c8AamTp0ABqUOnR"
    "AGpP6dIAalTp0wBqb+nUAGpp6dUAamDp1gBqPOnXAGpe6dgAalbp2QBqVenaAGpN6dsAak7p3ABq"
    "RundAGtV6d4Aa1Tp3wBrVungAGun6eEAa6rp4gBrq+njAGvI6eQAa8fp5QBsBOnmAGwD6ecAbAbp"
    "6ABvrenpAG/L6eoAb6Pp6wBvx+nsAG+86e0Ab87p7gBvyOnvAG9e6fAAb8Tp8QBvvenyAG+e6fMA"
    "b8rp9ABvqOn1AHAE6fYAb6Xp9wBvrun4AG+66fkAb6zp+gBvqun7AG/P6fwAb7/p/QBvuOn+AG+i"
    "6kAAb8nqQQBvq+pCAG/N6kMAb6/qRABvsupFAG+w6kYAccXqRwBxwupIAHG/6kkAcbjqSgBx1upL"
    "AHHA6kwAccHqTQBxy+pOAHHU6k8AccrqUABxx+pRAHHP6lIAcb3qUwBx2OpUAHG86lUAccbqVgBx"
    "2upXAHHb6lgAcp3qWQBynupaAHNp6lsAc2bqXABzZ+pdAHNs6l4Ac2XqXwBza+pgAHNq6mEAdH/q"
    "YgB0mupjAHSg6mQAdJTqZQB0kupmAHSV6mcAdKHqaAB1C+ppAHWA6moAdi/qawB2LepsAHYx6m0A"
    "dj3qbgB2M+pvAHY86nAAdjXqcQB2MupyAHYw6nMAdrvqdAB25up1AHea6nYAd53qdwB3oep4AHec"
    "6nkAd5vqegB3oup7AHej6nwAd5XqfQB3mep+AHeX6qEAeN3qogB46eqjAHjl6qQAeOrqpQB43uqm"
    "AHjj6qcAeNvqqAB44eqpAHji6qoAeO3qqwB43+qsAHjg6q0AeaTqrgB6ROqvAHpI6rAAekfqsQB6"
    "tuqyAHq46rMAerXqtAB6seq1AHq36rYAe97qtwB74+q4AHvn6rkAe93qugB71eq7AHvl6rwAe9rq"
    "vQB76Oq+AHv56r8Ae9TqwAB76urBAHvi6sIAe9zqwwB76+rEAHvY6sUAe9/qxgB80urHAHzU6sgA"
    "fNfqyQB80OrKAHzR6ssAfhLqzAB+IerNAH4X6s4AfgzqzwB+H+rQAH4g6tEAfhPq0gB+DurTAH4c"
    "6tQAfhXq1QB+GurWAH4i6tcAfgvq2AB+D+rZAH4W6toAfg3q2wB+FOrcAH4l6t0AfiTq3gB/Q+rf"
    "AH976uAAf3zq4QB/euriAH+x6uMAf+/q5ACAKurlAIAp6uYAgGzq5wCBseroAIGm6ukAga7q6gCB"
    "uerrAIG16uwAgavq7QCBsOruAIGs6u8AgbTq8ACBsurxAIG36vIAgafq8wCB8ur0AIJV6vUAglbq"
    "9gCCV+r3AIVW6vgAhUXq+QCFa+r6AIVN6vsAhVPq/ACFYer9AIVY6v4AhUDrQACFRutBAIVk60IA"
    "hUHrQwCFYutEAIVE60UAhVHrRgCFR+tHAIVj60gAhT7rSQCFW+tKAIVx60sAhU7rTACFbutNAIV1"
    "604AhVXrTwCFZ+tQAIVg61EAhYzrUgCFZutTAIVd61QAhVTrVQCFZetWAIVs61cAhmPrWACGZetZ"
    "AIZk61oAh5vrWwCHj+tcAIeX610Ah5PrXgCHkutfAIeI62AAh4HrYQCHlutiAIeY62MAh3nrZACH"
    "h+tlAIej62YAh4XrZwCHkOtoAIeR62kAh53ragCHhOtrAIeU62wAh5zrbQCHmutuAIeJ628AiR7r"
    "cACJJutxAIkw63IAiS3rcwCJLut0AIkn63UAiTHrdgCJIut3AIkp63gAiSPreQCJL+t6AIks63sA"
    "iR/rfACJ8et9AIrg634AiuLroQCK8uuiAIr066MAivXrpACK3eulAIsU66YAiuTrpwCK3+uoAIrw"
    "66kAisjrqgCK3uurAIrh66wAiujrrQCK/+uuAIrv668AivvrsACMkeuxAIyS67IAjJDrswCM9eu0"
    "AIzu67UAjPHrtgCM8Ou3AIzz67gAjWzruQCNbuu6AI2l67sAjafrvACOM+u9AI4+674AjjjrvwCO"
    "QOvAAI5F68EAjjbrwgCOPOvDAI4968QAjkHrxQCOMOvGAI4/68cAjr3ryACPNuvJAI8u68oAjzXr"
    "ywCPMuvMAI85680AjzfrzgCPNOvPAJB269AAkHnr0QCQe+vSAJCG69MAkPrr1ACRM+vVAJE169YA"
    "kTbr1wCRk+vYAJGQ69kAkZHr2gCRjevbAJGP69wAkyfr3QCTHuveAJMI698Akx/r4ACTBuvhAJMP"
    "6+IAk3rr4wCTOOvkAJM86+UAkxvr5gCTI+vnAJMS6+gAkwHr6QCTRuvqAJMt6+sAkw7r7ACTDevt"
    "AJLL6+4Akx3r7wCS+uvwAJMl6/EAkxPr8gCS+evzAJL36/QAkzTr9QCTAuv2AJMk6/cAkv/r+ACT"
    "Kev5AJM56/oAkzXr+wCTKuv8AJMU6/0Akwzr/gCTC+xAAJL+7EEAkwnsQgCTAOxDAJL77EQAkxbs"
    "RQCVvOxGAJXN7EcAlb7sSACVuexJAJW67EoAlbbsSwCVv+xMAJW17E0Alb3sTgCWqexPAJbU7FAA"
    "lwvsUQCXEuxSAJcQ7FMAl5nsVACXl+xVAJeU7FYAl/DsVwCX+OxYAJg17FkAmC/sWgCYMuxbAJkk"
    "7FwAmR/sXQCZJ+xeAJkp7F8AmZ7sYACZ7uxhAJns7GIAmeXsYwCZ5OxkAJnw7GUAmePsZgCZ6uxn"
    "AJnp7GgAmefsaQCauexqAJq/7GsAmrTsbACau+xtAJr27G4AmvrsbwCa+exwAJr37HEAmzPscgCb"
    "gOxzAJuF7HQAm4fsdQCbfOx2AJt+7HcAm3vseACbgux5AJuT7HoAm5LsewCbkOx8AJt67H0Am5Xs"
    "fgCbfeyhAJuI7KIAnSXsowCdF+ykAJ0g7KUAnR7spgCdFOynAJ0p7KgAnR3sqQCdGOyqAJ0i7KsA"
    "nRDsrACdGeytAJ0f7K4AnojsrwCehuywAJ6H7LEAnq7ssgCereyzAJ7V7LQAntbstQCe+uy2AJ8S"
    "7LcAnz3suABRJuy5AFEl7LoAUSLsuwBRJOy8AFEg7L0AUSnsvgBS9Oy/AFaT7MAAVozswQBWjezC"
    "AFaG7MMAVoTsxABWg+zFAFZ+7MYAVoLsxwBWf+zIAFaB7MkAWNbsygBY1OzLAFjP7MwAWNLszQBb"
    "LezOAFsl7M8AWzLs0ABbI+zRAFss7NIAWyfs0wBbJuzUAFsv7NUAWy7s1gBbe+zXAFvx7NgAW/Ls"
    "2QBdt+zaAF5s7NsAXmrs3ABfvuzdAF+77N4AYcPs3wBhtezgAGG87OEAYefs4gBh4OzjAGHl7OQA"
    "YeTs5QBh6OzmAGHe7OcAZO/s6ABk6ezpAGTj7OoAZOvs6wBk5OzsAGTo7O0AZYHs7gBlgOzvAGW2"
    "7PAAZdrs8QBm0uzyAGqN7PMAapbs9ABqgez1AGql7PYAaons9wBqn+z4AGqb7PkAaqHs+gBqnuz7"
    "AGqH7PwAapPs/QBqjuz+AGqV7UAAaoPtQQBqqO1CAGqk7UMAapHtRABqf+1FAGqm7UYAaprtRwBq"
    "he1IAGqM7UkAapLtSgBrW+1LAGut7UwAbAntTQBvzO1OAG+p7U8Ab/TtUABv1O1RAG/j7VIAb9zt"
    "UwBv7e1UAG/n7VUAb+btVgBv3u1XAG/y7VgAb93tWQBv4u1aAG/o7VsAceHtXABx8e1dAHHo7V4A"
    "cfLtXwBx5O1gAHHw7WEAceLtYgBzc+1jAHNu7WQAc2/tZQB0l+1mAHSy7WcAdKvtaAB0kO1pAHSq"
    "7WoAdK3tawB0se1sAHSl7W0AdK/tbgB1EO1vAHUR7XAAdRLtcQB1D+1yAHWE7XMAdkPtdAB2SO11"
    "AHZJ7XYAdkftdwB2pO14AHbp7XkAd7XtegB3q+17AHey7XwAd7ftfQB3tu1+AHe07aEAd7HtogB3"
    "qO2jAHfw7aQAePPtpQB4/e2mAHkC7acAePvtqAB4/O2pAHjy7aoAeQXtqwB4+e2sAHj+7a0AeQTt"
    "rgB5q+2vAHmo7bAAelztsQB6W+2yAHpW7bMAeljttAB6VO21AHpa7bYAer7ttwB6wO24AHrB7bkA"
    "fAXtugB8D+27AHvy7bwAfADtvQB7/+2+AHv77b8AfA7twAB79O3BAHwL7cIAe/PtwwB8Au3EAHwJ"
    "7cUAfAPtxgB8Ae3HAHv47cgAe/3tyQB8Bu3KAHvw7csAe/HtzAB8EO3NAHwK7c4AfOjtzwB+Le3Q"
    "AH487dEAfkLt0gB+M+3TAJhI7dQAfjjt1QB+Ku3WAH5J7dcAfkDt2AB+R+3ZAH4p7doAfkzt2wB+"
    "MO3cAH477d0Afjbt3gB+RO3fAH467eAAf0Xt4QB/f+3iAH9+7eMAf33t5AB/9O3lAH/y7eYAgCzt"
    "5wCBu+3oAIHE7ekAgczt6gCByu3rAIHF7ewAgcft7QCBvO3uAIHp7e8Aglvt8ACCWu3xAIJc7fIA"
    "hYPt8wCFgO30AIWP7fUAhaft9gCFle33AIWg7fgAhYvt+QCFo+36AIV77fsAhaTt/ACFmu39AIWe"
    "7f4AhXfuQACFfO5BAIWJ7kIAhaHuQwCFeu5EAIV47kUAhVfuRgCFju5HAIWW7kgAhYbuSQCFje5K"
    "AIWZ7ksAhZ3uTACFge5NAIWi7k4AhYLuTwCFiO5QAIWF7lEAhXnuUgCFdu5TAIWY7lQAhZDuVQCF"
    "n+5WAIZo7lcAh77uWACHqu5ZAIet7loAh8XuWwCHsO5cAIes7l0Ah7nuXgCHte5fAIe87mAAh67u"
    "YQCHye5iAIfD7mMAh8LuZACHzO5lAIe37mYAh6/uZwCHxO5oAIfK7mkAh7TuagCHtu5rAIe/7mwA"
    "h7jubQCHve5uAIfe7m8Ah7LucACJNe5xAIkz7nIAiTzucwCJPu50AIlB7nUAiVLudgCJN+53AIlC"
    "7ngAia3ueQCJr+56AImu7nsAifLufACJ8+59AIse7n4AixjuoQCLFu6iAIsR7qMAiwXupACLC+6l"
    "AIsi7qYAiw/upwCLEu6oAIsV7qkAiwfuqgCLDe6rAIsI7qwAiwburQCLHO6uAIsT7q8AixrusACM"
    "T+6xAIxw7rIAjHLuswCMce60AIxv7rUAjJXutgCMlO63AIz57rgAjW/uuQCOTu66AI5N7rsAjlPu"
    "vACOUO69AI5M7r4AjkfuvwCPQ+7AAI9A7sEAkIXuwgCQfu7DAJE47sQAkZruxQCRou7GAJGb7scA"
    "kZnuyACRn+7JAJGh7soAkZ3uywCRoO7MAJOh7s0Ak4PuzgCTr+7PAJNk7tAAk1bu0QCTR+7SAJN8"
    "7tMAk1ju1ACTXO7VAJN27tYAk0nu1wCTUO7YAJNR7tkAk2Du2gCTbe7bAJOP7twAk0zu3QCTau7e"
    "AJN57t8Ak1fu4ACTVe7hAJNS7uIAk0/u4wCTce7kAJN37uUAk3vu5gCTYe7nAJNe7ugAk2Pu6QCT"
    "Z+7qAJOA7usAk07u7ACTWe7tAJXH7u4AlcDu7wCVye7wAJXD7vEAlcXu8gCVt+7zAJau7vQAlrDu"
    "9QCWrO72AJcg7vcAlx/u+ACXGO75AJcd7voAlxnu+wCXmu78AJeh7v0Al5zu/gCXnu9AAJed70EA"
    "l9XvQgCX1O9DAJfx70QAmEHvRQCYRO9GAJhK70cAmEnvSACYRe9JAJhD70oAmSXvSwCZK+9MAJks"
    "700AmSrvTgCZM+9PAJky71AAmS/vUQCZLe9SAJkx71MAmTDvVACZmO9VAJmj71YAmaHvVwCaAu9Y"
    "AJn671kAmfTvWgCZ9+9bAJn571wAmfjvXQCZ9u9eAJn7718Amf3vYACZ/u9hAJn872IAmgPvYwCa"
    "vu9kAJr+72UAmv3vZgCbAe9nAJr872gAm0jvaQCbmu9qAJuo72sAm57vbACbm+9tAJum724Am6Hv"
    "bwCbpe9wAJuk73EAm4bvcgCbou9zAJug73QAm6/vdQCdM+92AJ1B73cAnWfveACdNu95AJ0u73oA"
    "nS/vewCdMe98AJ04730AnTDvfgCdRe+hAJ1C76IAnUPvowCdPu+kAJ0376UAnUDvpgCdPe+nAH/1"
    "76gAnS3vqQCeiu+qAJ6J76sAno3vrACesO+tAJ7I764AntrvrwCe+++wAJ7/77EAnyTvsgCfI++z"
    "AJ8i77QAn1TvtQCfoO+2AFEx77cAUS3vuABRLu+5AFaY77oAVpzvuwBWl++8AFaa770AVp3vvgBW"
    "me+/AFlw78AAWzzvwQBcae/CAFxq78MAXcDvxABebe/FAF5u78YAYdjvxwBh3+/IAGHt78kAYe7v"
    "ygBh8e/LAGHq78wAYfDvzQBh6+/OAGHW788AYenv0ABk/+/RAGUE79IAZP3v0wBk+O/UAGUB79UA"
    "ZQPv1gBk/O/XAGWU79gAZdvv2QBm2u/aAGbb79sAZtjv3ABqxe/dAGq5794Aar3v3wBq4e/gAGrG"
    "7+EAarrv4gBqtu/jAGq37+QAasfv5QBqtO/mAGqt7+cAa17v6ABrye/pAGwL7+oAcAfv6wBwDO/s"
    "AHAN7+0AcAHv7gBwBe/vAHAU7/AAcA7v8QBv/+/yAHAA7/MAb/vv9ABwJu/1AG/87/YAb/fv9wBw"
    "Cu/4AHIB7/kAcf/v+gBx+e/7AHID7/wAcf3v/QBzdu/+AHS48EAAdMDwQQB0tfBCAHTB8EMAdL7w"
    "RAB0tvBFAHS78EYAdMLwRwB1FPBIAHUT8EkAdlzwSgB2ZPBLAHZZ8EwAdlDwTQB2U/BOAHZX8E8A"
    "dlrwUAB2pvBRAHa98FIAduzwUwB3wvBUAHe68FUAeP/wVgB5DPBXAHkT8FgAeRTwWQB5CfBaAHkQ"
    "8FsAeRLwXAB5EfBdAHmt8F4AeazwXwB6X/BgAHwc8GEAfCnwYgB8GfBjAHwg8GQAfB/wZQB8LfBm"
    "AHwd8GcAfCbwaAB8KPBpAHwi8GoAfCXwawB8MPBsAH5c8G0AflDwbgB+VvBvAH5j8HAAfljwcQB+"
    "YvByAH5f8HMAflHwdAB+YPB1AH5X8HYAflPwdwB/tfB4AH+z8HkAf/fwegB/+PB7AIB18HwAgdHw"
    "fQCB0vB+AIHQ8KEAgl/wogCCXvCjAIW08KQAhcbwpQCFwPCmAIXD8KcAhcLwqACFs/CpAIW18KoA"
    "hb3wqwCFx/CsAIXE8K0Ahb/wrgCFy/CvAIXO8LAAhcjwsQCFxfCyAIWx8LMAhbbwtACF0vC1AIYk"
    "8LYAhbjwtwCFt/C4AIW+8LkAhmnwugCH5/C7AIfm8LwAh+LwvQCH2/C+AIfr8L8Ah+rwwACH5fDB"
    "AIff8MIAh/PwwwCH5PDEAIfU8MUAh9zwxgCH0/DHAIft8MgAh9jwyQCH4/DKAIek8MsAh9fwzACH"
    "2fDNAIgB8M4Ah/TwzwCH6PDQAIfd8NEAiVPw0gCJS/DTAIlP8NQAiUzw1QCJRvDWAIlQ8NcAiVHw"
    "2ACJSfDZAIsq8NoAiyfw2wCLI/DcAIsz8N0AizDw3gCLNfDfAItH8OAAiy/w4QCLPPDiAIs+8OMA"
    "izHw5ACLJfDlAIs38OYAiybw5wCLNvDoAIsu8OkAiyTw6gCLO/DrAIs98OwAizrw7QCMQvDuAIx1"
    "8O8AjJnw8ACMmPDxAIyX8PIAjP7w8wCNBPD0AI0C8PUAjQDw9gCOXPD3AI5i8PgAjmDw+QCOV/D6"
    "AI5W8PsAjl7w/ACOZfD9AI5n8P4AjlvxQACOWvFBAI5h8UIAjl3xQwCOafFEAI5U8UUAj0bxRgCP"
    "R/FHAI9I8UgAj0vxSQCRKPFKAJE68UsAkTvxTACRPvFNAJGo8U4AkaXxTwCRp/FQAJGv8VEAkarx"
    "UgCTtfFTAJOM8VQAk5LxVQCTt/FWAJOb8VcAk53xWACTifFZAJOn8VoAk47xWwCTqvFcAJOe8V0A"
    "k6bxXgCTlfFfAJOI8WAAk5nxYQCTn/FiAJON8WMAk7HxZACTkfFlAJOy8WYAk6TxZwCTqPFoAJO0"
    "8WkAk6PxagCTpfFrAJXS8WwAldPxbQCV0fFuAJaz8W8AltfxcACW2vFxAF3C8XIAlt/xcwCW2PF0"
    "AJbd8XUAlyPxdgCXIvF3AJcl8XgAl6zxeQCXrvF6AJeo8XsAl6vxfACXpPF9AJeq8X4Al6LxoQCX"
    "pfGiAJfX8aMAl9nxpACX1vGlAJfY8aYAl/rxpwCYUPGoAJhR8akAmFLxqgCYuPGrAJlB8awAmTzx"
    "rQCZOvGuAJoP8a8AmgvxsACaCfGxAJoN8bIAmgTxswCaEfG0AJoK8bUAmgXxtgCaB/G3AJoG8bgA"
    "msDxuQCa3PG6AJsI8bsAmwTxvACbBfG9AJsp8b4AmzXxvwCbSvHAAJtM8cEAm0vxwgCbx/HDAJvG"
    "8cQAm8PxxQCbv/HGAJvB8ccAm7XxyACbuPHJAJvT8coAm7bxywCbxPHMAJu58c0Am73xzgCdXPHP"
    "AJ1T8dAAnU/x0QCdSvHSAJ1b8dMAnUvx1ACdWfHVAJ1W8dYAnUzx1wCdV/HYAJ1S8dkAnVTx2gCd"
    "X/HbAJ1Y8dwAnVrx3QCejvHeAJ6M8d8Ant/x4ACfAfHhAJ8A8eIAnxbx4wCfJfHkAJ8r8eUAnyrx"
    "5gCfKfHnAJ8o8egAn0zx6QCfVfHqAFE08esAUTXx7ABSlvHtAFL38e4AU7Tx7wBWq/HwAFat8fEA"
    "Vqbx8gBWp/HzAFaq8fQAVqzx9QBY2vH2AFjd8fcAWNvx+ABZEvH5AFs98foAWz7x+wBbP/H8AF3D"
    "8f0AXnDx/gBfv/JAAGH78kEAZQfyQgBlEPJDAGUN8kQAZQnyRQBlDPJGAGUO8kcAZYTySABl3vJJ"
    "AGXd8koAZt7ySwBq5/JMAGrg8k0AaszyTgBq0fJPAGrZ8lAAasvyUQBq3/JSAGrc8lMAatDyVABq"
    "6/JVAGrP8lYAas3yVwBq3vJYAGtg8lkAa7DyWgBsDPJbAHAZ8lwAcCfyXQBwIPJeAHAW8l8AcCvy"
    "YABwIfJhAHAi8mIAcCPyYwBwKfJkAHAX8mUAcCTyZgBwHPJnAHAq8mgAcgzyaQByCvJqAHIH8msA"
    "cgLybAByBfJtAHKl8m4AcqbybwBypPJwAHKj8nEAcqHycgB0y/JzAHTF8nQAdLfydQB0w/J2AHUW"
    "8ncAdmDyeAB3yfJ5AHfK8noAd8TyewB38fJ8AHkd8n0AeRvyfgB5IfKhAHkc8qIAeRfyowB5HvKk"
    "AHmw8qUAemfypgB6aPKnAHwz8qgAfDzyqQB8OfKqAHws8qsAfDvyrAB87PKtAHzq8q4AfnbyrwB+"
    "dfKwAH548rEAfnDysgB+d/KzAH5v8rQAfnrytQB+cvK2AH508rcAfmjyuAB/S/K5AH9K8roAf4Py"
    "uwB/hvK8AH+38r0Af/3yvgB//vK/AIB48sAAgdfywQCB1fLCAIJk8sMAgmHyxACCY/LFAIXr8sYA"
    "hfHyxwCF7fLIAIXZ8skAheHyygCF6PLLAIXa8swAhdfyzQCF7PLOAIXy8s8Ahfjy0ACF2PLRAIXf"
    "8tIAhePy0wCF3PLUAIXR8tUAhfDy1gCF5vLXAIXv8tgAhd7y2QCF4vLaAIgA8tsAh/ry3ACIA/Ld"
    "AIf28t4Ah/fy3wCICfLgAIgM8uEAiAvy4gCIBvLjAIf88uQAiAjy5QCH//LmAIgK8ucAiALy6ACJ"
    "YvLpAIla8uoAiVvy6wCJV/LsAIlh8u0AiVzy7gCJWPLvAIld8vAAiVny8QCJiPLyAIm38vMAibby"
    "9ACJ9vL1AItQ8vYAi0jy9wCLSvL4AItA8vkAi1Py+gCLVvL7AItU8vwAi0vy/QCLVfL+AItR80AA"
    "i0LzQQCLUvNCAItX80MAjEPzRACMd/NFAIx280YAjJrzRwCNBvNIAI0H80kAjQnzSgCNrPNLAI2q"
    "80wAja3zTQCNq/NOAI5t808AjnjzUACOc/NRAI5q81IAjm/zUwCOe/NUAI7C81UAj1LzVgCPUfNX"
    "AI9P81gAj1DzWQCPU/NaAI+081sAkUDzXACRP/NdAJGw814Aka3zXwCT3vNgAJPH82EAk8/zYgCT"
    "wvNjAJPa82QAk9DzZQCT+fNmAJPs82cAk8zzaACT2fNpAJOp82oAk+bzawCTyvNsAJPU820Ak+7z"
    "bgCT4/NvAJPV83AAk8TzcQCTzvNyAJPA83MAk9LzdACT5/N1AJV983YAldrzdwCV2/N4AJbh83kA"
    "lynzegCXK/N7AJcs83wAlyjzfQCXJvN+AJez86EAl7fzogCXtvOjAJfd86QAl97zpQCX3/OmAJhc"
    "86cAmFnzqACYXfOpAJhX86oAmL/zqwCYvfOsAJi7860AmL7zrgCZSPOvAJlH87AAmUPzsQCZpvOy"
    "AJmn87MAmhrztACaFfO1AJol87YAmh3ztwCaJPO4AJob87kAmiLzugCaIPO7AJon87wAmiPzvQCa"
    "HvO+AJoc878AmhTzwACawvPBAJsL88IAmwrzwwCbDvPEAJsM88UAmzfzxgCb6vPHAJvr88gAm+Dz"
    "yQCb3vPKAJvk88sAm+bzzACb4vPNAJvw884Am9TzzwCb1/PQAJvs89EAm9zz0gCb2fPTAJvl89QA"
    "m9Xz1QCb4fPWAJva89cAnXfz2ACdgfPZAJ2K89oAnYTz2wCdiPPcAJ1x890AnYDz3gCdePPfAJ2G"
    "8+AAnYvz4QCdjPPiAJ198+MAnWvz5ACddPPlAJ118+YAnXDz5wCdafPoAJ2F8+kAnXPz6gCde/Pr"
    "AJ2C8+wAnW/z7QCdefPuAJ1/8+8AnYfz8ACdaPPxAJ6U8/IAnpHz8wCewPP0AJ788/UAny3z9gCf"
    "QPP3AJ9B8/gAn03z+QCfVvP6AJ9X8/sAn1jz/ABTN/P9AFay8/4AVrX0QABWs/RBAFjj9EIAW0X0"
    "QwBdxvREAF3H9EUAXu70RgBe7/RHAF/A9EgAX8H0SQBh+fRKAGUX9EsAZRb0TABlFfRNAGUT9E4A"
    "Zd/0TwBm6PRQAGbj9FEAZuT0UgBq8/RTAGrw9FQAaur0VQBq6PRWAGr59FcAavH0WABq7vRZAGrv"
    "9FoAcDz0WwBwNfRcAHAv9F0AcDf0XgBwNPRfAHAx9GAAcEL0YQBwOPRiAHA/9GMAcDr0ZABwOfRl"
    "AHBA9GYAcDv0ZwBwM/RoAHBB9GkAchP0agByFPRrAHKo9GwAc330bQBzfPRuAHS69G8Adqv0cAB2"
    "qvRxAHa+9HIAdu30cwB3zPR0AHfO9HUAd8/0dgB3zfR3AHfy9HgAeSX0eQB5I/R6AHkn9HsAeSj0"
    "fAB5JPR9AHkp9H4AebL0oQB6bvSiAHps9KMAem30pAB69/SlAHxJ9KYAfEj0pwB8SvSoAHxH9KkA"
    "fEX0qgB87vSrAH579KwAfn70rQB+gfSuAH6A9K8Af7r0sAB///SxAIB59LIAgdv0swCB2fS0AIIL"
    "9LUAgmj0tgCCafS3AIYi9LgAhf/0uQCGAfS6AIX+9LsAhhv0vACGAPS9AIX29L4AhgT0vwCGCfTA"
    "AIYF9MEAhgz0wgCF/fTDAIgZ9MQAiBD0xQCIEfTGAIgX9McAiBP0yACIFvTJAIlj9MoAiWb0ywCJ"
    "ufTMAIn39M0Ai2D0zgCLavTPAItd9NAAi2j00QCLY/TSAItl9NMAi2f01ACLbfTVAI2u9NYAjob0"
    "1wCOiPTYAI6E9NkAj1n02gCPVvTbAI9X9NwAj1X03QCPWPTeAI9a9N8AkI304ACRQ/ThAJFB9OIA"
    "kbf04wCRtfTkAJGy9OUAkbP05gCUC/TnAJQT9OgAk/v06QCUIPTqAJQP9OsAlBT07ACT/vTtAJQV"
    "9O4AlBD07wCUKPTwAJQZ9PEAlA308gCT9fTzAJQA9PQAk/f09QCUB/T2AJQO9PcAlBb0+ACUEvT5"
    "AJP69PoAlAn0+wCT+PT8AJQK9P0Ak//0/gCT/PVAAJQM9UEAk/b1QgCUEfVDAJQG9UQAld71RQCV"
    "4PVGAJXf9UcAly71SACXL/VJAJe59UoAl7v1SwCX/fVMAJf+9U0AmGD1TgCYYvVPAJhj9VAAmF/1"
    "UQCYwfVSAJjC9VMAmVD1VACZTvVVAJlZ9VYAmUz1VwCZS/VYAJlT9VkAmjL1WgCaNPVbAJox9VwA"
    "miz1XQCaKvVeAJo29V8Amin1YACaLvVhAJo49WIAmi31YwCax/VkAJrK9WUAmsb1ZgCbEPVnAJsS"
    "9WgAmxH1aQCcC/VqAJwI9WsAm/f1bACcBfVtAJwS9W4Am/j1bwCcQPVwAJwH9XEAnA71cgCcBvVz"
    "AJwX9XQAnBT1dQCcCfV2AJ2f9XcAnZn1eACdpPV5AJ2d9XoAnZL1ewCdmPV8AJ2Q9X0AnZv1fgCd"
    "oPWhAJ2U9aIAnZz1owCdqvWkAJ2X9aUAnaH1pgCdmvWnAJ2i9agAnaj1qQCdnvWqAJ2j9asAnb/1"
    "rACdqfWtAJ2W9a4Anab1rwCdp/WwAJ6Z9bEAnpv1sgCemvWzAJ7l9bQAnuT1tQCe5/W2AJ7m9bcA"
    "nzD1uACfLvW5AJ9b9boAn2D1uwCfXvW8AJ9d9b0An1n1vgCfkfW/AFE69cAAUTn1wQBSmPXCAFKX"
    "9cMAVsP1xABWvfXFAFa+9cYAW0j1xwBbR/XIAF3L9ckAXc/1ygBe8fXLAGH99cwAZRv1zQBrAvXO"
    "AGr89c8AawP10ABq+PXRAGsA9dIAcEP10wBwRPXUAHBK9dUAcEj11gBwSfXXAHBF9dgAcEb12QBy"
    "HfXaAHIa9dsAchn13ABzfvXdAHUX9d4Admr13wB30PXgAHkt9eEAeTH14gB5L/XjAHxU9eQAfFP1"
    "5QB88vXmAH6K9ecAfof16AB+iPXpAH6L9eoAfob16wB+jfXsAH9N9e0Af7v17gCAMPXvAIHd9fAA"
    "hhj18QCGKvXyAIYm9fMAhh/19ACGI/X1AIYc9fYAhhn19wCGJ/X4AIYu9fkAhiH1+gCGIPX7AIYp"
    "9fwAhh71/QCGJfX+AIgp9kAAiB32QQCIG/ZCAIgg9kMAiCT2RACIHPZFAIgr9kYAiEr2RwCJbfZI"
    "AIlp9kkAiW72SgCJa/ZLAIn69kwAi3n2TQCLePZOAItF9k8Ai3r2UACLe/ZRAI0Q9lIAjRT2UwCN"
    "r/ZUAI6O9lUAjoz2VgCPXvZXAI9b9lgAj132WQCRRvZaAJFE9lsAkUX2XACRufZdAJQ/9l4AlDv2"
    "XwCUNvZgAJQp9mEAlD32YgCUPPZjAJQw9mQAlDn2ZQCUKvZmAJQ39mcAlCz2aACUQPZpAJQx9moA"
    "leX2awCV5PZsAJXj9m0AlzX2bgCXOvZvAJe/9nAAl+H2cQCYZPZyAJjJ9nMAmMb2dACYwPZ1AJlY"
    "9nYAmVb2dwCaOfZ4AJo99nkAmkb2egCaRPZ7AJpC9nwAmkH2fQCaOvZ+AJo/9qEAms32ogCbFfaj"
    "AJsX9qQAmxj2pQCbFvamAJs69qcAm1L2qACcK/apAJwd9qoAnBz2qwCcLPasAJwj9q0AnCj2rgCc"
    "KfavAJwk9rAAnCH2sQCdt/ayAJ229rMAnbz2tACdwfa1AJ3H9rYAncr2twCdz/a4AJ2+9rkAncX2"
    "ugCdw/a7AJ279rwAnbX2vQCdzva+AJ259r8Anbr2wACdrPbBAJ3I9sIAnbH2wwCdrfbEAJ3M9sUA"
    "nbP2xgCdzfbHAJ2y9sgAnnr2yQCenPbKAJ7r9ssAnu72zACe7fbNAJ8b9s4Anxj2zwCfGvbQAJ8x"
    "9tEAn0720gCfZfbTAJ9k9tQAn5L21QBOufbWAFbG9tcAVsX22ABWy/bZAFlx9toAW0v22wBbTPbc"
    "AF3V9t0AXdH23gBe8vbfAGUh9uAAZSD24QBlJvbiAGUi9uMAawv25ABrCPblAGsJ9uYAbA325wBw"
    "VfboAHBW9ukAcFf26gBwUvbrAHIe9uwAch/27QByqfbuAHN/9u8AdNj28AB01fbxAHTZ9vIAdNf2"
    "8wB2bfb0AHat9vUAeTX29gB5tPb3AHpw9vgAenH2+QB8V/b6AHxc9vsAfFn2/AB8W/b9AHxa9v4A"
    "fPT3QAB88fdBAH6R90IAf0/3QwB/h/dEAIHe90UAgmv3RgCGNPdHAIY190gAhjP3SQCGLPdKAIYy"
    "90sAhjb3TACILPdNAIgo904AiCb3TwCIKvdQAIgl91EAiXH3UgCJv/dTAIm+91QAifv3VQCLfvdW"
    "AIuE91cAi4L3WACLhvdZAIuF91oAi3/3WwCNFfdcAI6V910AjpT3XgCOmvdfAI6S92AAjpD3YQCO"
    "lvdiAI6X92MAj2D3ZACPYvdlAJFH92YAlEz3ZwCUUPdoAJRK92kAlEv3agCUT/drAJRH92wAlEX3"
    "bQCUSPduAJRJ928AlEb3cACXP/dxAJfj93IAmGr3cwCYafd0AJjL93UAmVT3dgCZW/d3AJpO93gA"
    "mlP3eQCaVPd6AJpM93sAmk/3fACaSPd9AJpK934Amkn3oQCaUveiAJpQ96MAmtD3pACbGfelAJsr"
    "96YAmzv3pwCbVveoAJtV96kAnEb3qgCcSPerAJw/96wAnET3rQCcOfeuAJwz968AnEH3sACcPPex"
    "AJw397IAnDT3swCcMve0AJw997UAnDb3tgCd2/e3AJ3S97gAnd73uQCd2ve6AJ3L97sAndD3vACd"
    "3Pe9AJ3R974And/3vwCd6ffAAJ3Z98EAndj3wgCd1vfDAJ3198QAndX3xQCd3ffGAJ6298cAnvD3"
    "yACfNffJAJ8z98oAnzL3ywCfQvfMAJ9r980An5X3zgCfovfPAFE999AAUpn30QBY6PfSAFjn99MA"
    "WXL31ABbTffVAF3Y99YAiC/31wBfT/fYAGIB99kAYgP32gBiBPfbAGUp99wAZSX33QBllvfeAGbr"
    "998AaxH34ABrEvfhAGsP9+IAa8r34wBwW/fkAHBa9+UAciL35gBzgvfnAHOB9+gAc4P36QB2cPfq"
    "AHfU9+sAfGf37AB8ZvftAH6V9+4Agmz37wCGOvfwAIZA9/EAhjn38gCGPPfzAIYx9/QAhjv39QCG"
    "Pvf2AIgw9/cAiDL3+ACILvf5AIgz9/oAiXb3+wCJdPf8AIlz9/0Aif73/gCLjPhAAIuO+EEAi4v4"
    "QgCLiPhDAIxF+EQAjRn4RQCOmPhGAI9k+EcAj2P4SACRvPhJAJRi+EoAlFX4SwCUXfhMAJRX+E0A"
    "lF74TgCXxPhPAJfF+FAAmAD4UQCaVvhSAJpZ+FMAmx74VACbH/hVAJsg+FYAnFL4VwCcWPhYAJxQ"
    "+FkAnEr4WgCcTfhbAJxL+FwAnFX4XQCcWfheAJxM+F8AnE74YACd+/hhAJ33+GIAne/4YwCd4/hk"
    "AJ3r+GUAnfj4ZgCd5PhnAJ32+GgAneH4aQCd7vhqAJ3m+GsAnfL4bACd8PhtAJ3i+G4Anez4bwCd"
    "9PhwAJ3z+HEAnej4cgCd7fhzAJ7C+HQAntD4dQCe8vh2AJ7z+HcAnwb4eACfHPh5AJ84+HoAnzf4"
    "ewCfNvh8AJ9D+H0An0/4fgCfcfihAJ9w+KIAn274owCfb/ikAFbT+KUAVs34pgBbTvinAFxt+KgA"
    "ZS34qQBm7fiqAGbu+KsAaxP4rABwX/itAHBh+K4AcF34rwBwYPiwAHIj+LEAdNv4sgB05fizAHfV"
    "+LQAeTj4tQB5t/i2AHm2+LcAfGr4uAB+l/i5AH+J+LoAgm34uwCGQ/i8AIg4+L0AiDf4vgCINfi/"
    "AIhL+MAAi5T4wQCLlfjCAI6e+MMAjp/4xACOoPjFAI6d+MYAkb74xwCRvfjIAJHC+MkAlGv4ygCU"
    "aPjLAJRp+MwAluX4zQCXRvjOAJdD+M8Al0f40ACXx/jRAJfl+NIAml740wCa1fjUAJtZ+NUAnGP4"
    "1gCcZ/jXAJxm+NgAnGL42QCcXvjaAJxg+NsAngL43ACd/vjdAJ4H+N4AngP43wCeBvjgAJ4F+OEA"
    "ngD44gCeAfjjAJ4J+OQAnf/45QCd/fjmAJ4E+OcAnqD46ACfHvjpAJ9G+OoAn3T46wCfdfjsAJ92"
    "+O0AVtT47gBlLvjvAGW4+PAAaxj48QBrGfjyAGsX+PMAaxr49ABwYvj1AHIm+PYAcqr49wB32Pj4"
    "AHfZ+PkAeTn4+gB8afj7AHxr+PwAfPb4/QB+mvj+AH6Y+UAAfpv5QQB+mflCAIHg+UMAgeH5RACG"
    "RvlFAIZH+UYAhkj5RwCJeflIAIl6+UkAiXz5SgCJe/lLAIn/+UwAi5j5TQCLmflOAI6l+U8AjqT5"
    "UACOo/lRAJRu+VIAlG35UwCUb/lUAJRx+VUAlHP5VgCXSflXAJhy+VgAmV/5WQCcaPlaAJxu+VsA"
    "nG35XACeC/ldAJ4N+V4AnhD5XwCeD/lgAJ4S+WEAnhH5YgCeofljAJ71+WQAnwn5ZQCfR/lmAJ94"
    "+WcAn3v5aACfevlpAJ95+WoAVx75awBwZvlsAHxv+W0AiDz5bgCNsvlvAI6m+XAAkcP5cQCUdPly"
    "AJR4+XMAlHb5dACUdfl1AJpg+XYAnHT5dwCcc/l4AJxx+XkAnHX5egCeFPl7AJ4T+XwAnvb5fQCf"
    "Cvl+AJ+k+aEAcGj5ogBwZfmjAHz3+aQAhmr5pQCIPvmmAIg9+acAiD/5qACLnvmpAIyc+aoAjqn5"
    "qwCOyfmsAJdL+a0AmHP5rgCYdPmvAJjM+bAAmWH5sQCZq/myAJpk+bMAmmb5tACaZ/m1AJsk+bYA"
    "nhX5twCeF/m4AJ9I+bkAYgf5ugBrHvm7AHIn+bwAhkz5vQCOqPm+AJSC+b8AlID5wACUgfnBAJpp"
    "+cIAmmj5wwCbLvnEAJ4Z+cUAcin5xgCGS/nHAIuf+cgAlIP5yQCcefnKAJ63+csAdnX5zACaa/nN"
    "AJx6+c4Anh35zwBwafnQAHBq+dEAnqT50gCffvnTAJ9J+dQAn5j51QB4gfnWAJK5+dcAiM/52ABY"
    "u/nZAGBS+doAfKf52wBa+vncACVU+d0AJWb53gAlV/nfACVg+eAAJWz54QAlY/niACVa+eMAJWn5"
    "5AAlXfnlACVS+eYAJWT55wAlVfnoACVY+ewAJWf57QAlW/nuACVT+e8AJWX58AAlVvnxACVf+fIA"
    "JWv58wAlYvn0ACVZ+fUAJWj59gAlXPn3ACVR+fgAJZP5/g=="
)
